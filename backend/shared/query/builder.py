from typing import List

from backend.shared.query.criteria import (
    EQ,
    GTE,
    ICONTAINS,
    LTE,
    SEARCH,
    ListingCriteria,
    ListingProfile,
    PaginationResult,
    Predicate,
    QueryPlan,
)


def build_query(profile: ListingProfile, criteria: ListingCriteria) -> QueryPlan:
    """
    Translate listing criteria into a storage-agnostic query plan.

    Each active filter contributes its own predicate, so two bounds on the
    same column become two terms instead of overwriting each other. The
    availability constraint always comes first and cannot be switched off by
    the criteria. Unknown or missing sort keys fall back to the profile's
    default ordering.

    Args:
        profile: Entity type description
        criteria: Already validated filters for one request

    Returns:
        Query plan with predicates, ordering, offset and limit
    """
    predicates: List[Predicate] = [profile.availability]

    if criteria.category is not None:
        predicates.append(Predicate(profile.category_field, EQ, criteria.category))

    for price in profile.price_fields:
        bounds = criteria.price_ranges.get(price.field)
        if bounds is None:
            continue
        if bounds.min is not None:
            predicates.append(Predicate(price.field, GTE, bounds.min))
        if bounds.max is not None:
            predicates.append(Predicate(price.field, LTE, bounds.max))

    for location_field in profile.location_fields:
        value = criteria.location.get(location_field)
        if value:
            predicates.append(Predicate(location_field, ICONTAINS, value))

    if criteria.search:
        predicates.append(Predicate(profile.search_fields, SEARCH, criteria.search))

    ordering = profile.sort_options.get(criteria.sort) or profile.default_ordering

    return QueryPlan(
        predicates=tuple(predicates),
        ordering=tuple(ordering),
        offset=(criteria.page - 1) * criteria.page_size,
        limit=criteria.page_size,
    )


def paginate(total: int, page: int, page_size: int) -> PaginationResult:
    """
    Compute pagination metadata from a total match count.

    A page past the last one is reported as requested, never clamped.
    """
    pages = -(-total // page_size) if total > 0 else 0
    return PaginationResult(page=page, page_size=page_size, total=total, pages=pages)
