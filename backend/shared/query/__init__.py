from backend.shared.query.builder import build_query, paginate
from backend.shared.query.criteria import (
    ListingCriteria,
    ListingProfile,
    Ordering,
    PaginationResult,
    Predicate,
    PriceField,
    PriceRange,
    QueryPlan,
)
from backend.shared.query.profiles import MATERIAL_PROFILE, VEHICLE_PROFILE

__all__ = [
    "build_query",
    "paginate",
    "ListingCriteria",
    "ListingProfile",
    "Ordering",
    "PaginationResult",
    "Predicate",
    "PriceField",
    "PriceRange",
    "QueryPlan",
    "MATERIAL_PROFILE",
    "VEHICLE_PROFILE",
]
