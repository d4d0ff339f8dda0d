"""Translate query plan terms into SQLAlchemy expressions."""

from typing import Any, List, Sequence

from sqlalchemy import asc, desc, or_
from sqlalchemy.sql.elements import ColumnElement

from backend.shared.query.criteria import (
    DESC,
    ICONTAINS,
    SEARCH,
    Ordering,
    Predicate,
)

# Maps plan operators to SQLAlchemy column methods.
# For example, a ``gte`` predicate calls ``Column.__ge__(value)``.
OPERATOR_MAP = {
    'eq': '__eq__',     # Equal
    'gte': '__ge__',    # Greater Than or Equal
    'lte': '__le__',    # Less Than or Equal
}


def like_pattern(term: str) -> str:
    """Wrap a user supplied term for a substring LIKE, escaping wildcards."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _column(model: Any, name: str):
    column = getattr(model, name, None)
    if column is None:
        raise ValueError(f"{model.__name__} has no column '{name}'")
    return column


def compile_predicate(model: Any, predicate: Predicate) -> ColumnElement:
    """Build the SQLAlchemy clause for one predicate."""
    if predicate.op == SEARCH:
        pattern = like_pattern(predicate.value)
        return or_(*[
            _column(model, name).ilike(pattern, escape="\\")
            for name in predicate.field
        ])

    column = _column(model, predicate.field)

    if predicate.op == ICONTAINS:
        return column.ilike(like_pattern(predicate.value), escape="\\")

    method = OPERATOR_MAP.get(predicate.op)
    if method is None:
        raise ValueError(f"Unsupported predicate operator '{predicate.op}'")
    return getattr(column, method)(predicate.value)


def compile_predicates(model: Any, predicates: Sequence[Predicate]) -> List[ColumnElement]:
    """Compile every predicate of a plan; callers AND them together."""
    return [compile_predicate(model, predicate) for predicate in predicates]


def compile_ordering(model: Any, ordering: Sequence[Ordering]) -> List[ColumnElement]:
    """Compile sort terms in order."""
    return [
        desc(_column(model, term.field)) if term.direction == DESC else asc(_column(model, term.field))
        for term in ordering
    ]
