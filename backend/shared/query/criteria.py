"""Value types for the listing filter engine.

Everything here is immutable so that a criteria object or a built plan can be
shared, compared and reused without one request observing another's state.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Union

# Predicate operators understood by the query compilers
EQ = "eq"
GTE = "gte"
LTE = "lte"
ICONTAINS = "icontains"
SEARCH = "search"

ASC = "asc"
DESC = "desc"


@dataclass(frozen=True)
class PriceRange:
    """Inclusive bounds on a price field. Either side may be missing."""
    min: Optional[float] = None
    max: Optional[float] = None


@dataclass(frozen=True)
class Predicate:
    """A single constraint; a plan's predicates are combined with AND.

    ``field`` is a column name, or a tuple of column names for ``search``.
    """
    field: Union[str, Tuple[str, ...]]
    op: str
    value: Any


@dataclass(frozen=True)
class Ordering:
    """One (field, direction) sort term."""
    field: str
    direction: str = ASC


@dataclass(frozen=True)
class QueryPlan:
    """Storage-agnostic description of one listing query."""
    predicates: Tuple[Predicate, ...]
    ordering: Tuple[Ordering, ...]
    offset: int
    limit: int


@dataclass(frozen=True)
class PaginationResult:
    page: int
    page_size: int
    total: int
    pages: int

    def to_dict(self) -> Dict[str, int]:
        """Shape used in API responses."""
        return {
            "page": self.page,
            "limit": self.page_size,
            "total": self.total,
            "pages": self.pages,
        }


@dataclass(frozen=True)
class PriceField:
    """A filterable price column and the query parameters bounding it."""
    field: str
    min_param: str
    max_param: str


@dataclass(frozen=True)
class ListingProfile:
    """Describes how one catalog entity type is filtered and sorted."""
    name: str
    label: str
    availability: Predicate
    price_fields: Tuple[PriceField, ...]
    search_fields: Tuple[str, ...]
    sort_options: Mapping[str, Tuple[Ordering, ...]]
    default_ordering: Tuple[Ordering, ...]
    location_fields: Tuple[str, ...] = ()
    category_field: str = "category"


@dataclass(frozen=True)
class ListingCriteria:
    """Parsed, already validated listing filters for a single request.

    ``price_ranges`` and ``location`` are keyed by column name. A missing key,
    a ``None`` bound or an empty location string all mean "no constraint".
    """
    category: Optional[str] = None
    price_ranges: Mapping[str, PriceRange] = field(default_factory=dict)
    location: Mapping[str, str] = field(default_factory=dict)
    search: Optional[str] = None
    sort: Optional[str] = None
    page: int = 1
    page_size: int = 10
