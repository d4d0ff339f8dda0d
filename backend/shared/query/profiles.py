"""Filter and sort descriptions for the two catalog entity types."""

from backend.shared.models.catalog import VehicleStatus
from backend.shared.query.criteria import (
    ASC,
    DESC,
    EQ,
    ListingProfile,
    Ordering,
    Predicate,
    PriceField,
)

FEATURED_THEN_RATING = (Ordering("featured", DESC), Ordering("rating", DESC))

VEHICLE_PROFILE = ListingProfile(
    name="vehicle",
    label="Vehicle",
    availability=Predicate("status", EQ, VehicleStatus.ACTIVE.value),
    price_fields=(
        PriceField("price_per_hour", "minPriceHour", "maxPriceHour"),
        PriceField("price_per_day", "minPriceDay", "maxPriceDay"),
    ),
    location_fields=("city", "state"),
    search_fields=("name", "description", "type", "model"),
    sort_options={
        "price_hour_asc": (Ordering("price_per_hour", ASC),),
        "price_hour_desc": (Ordering("price_per_hour", DESC),),
        "price_day_asc": (Ordering("price_per_day", ASC),),
        "price_day_desc": (Ordering("price_per_day", DESC),),
        "rating": (Ordering("rating", DESC),),
        "newest": (Ordering("created_at", DESC),),
    },
    default_ordering=FEATURED_THEN_RATING,
)

MATERIAL_PROFILE = ListingProfile(
    name="material",
    label="Material",
    availability=Predicate("is_available", EQ, True),
    price_fields=(
        PriceField("price_per_unit", "minPrice", "maxPrice"),
    ),
    search_fields=("name", "description"),
    sort_options={
        "price_asc": (Ordering("price_per_unit", ASC),),
        "price_desc": (Ordering("price_per_unit", DESC),),
        "rating": (Ordering("rating", DESC),),
        "newest": (Ordering("created_at", DESC),),
    },
    default_ordering=FEATURED_THEN_RATING,
)
