"""Query-parameter parsing for the catalog listing endpoints."""

from typing import Optional

from fastapi import Query

from backend.shared.models.catalog import MaterialCategory, VehicleCategory
from backend.shared.query import ListingCriteria, PriceRange

MAX_LIMIT = 100
# Largest page whose row offset still fits a signed 64-bit integer
MAX_PAGE = (2 ** 63 - 1) // MAX_LIMIT


def get_vehicle_criteria(
    page: int = Query(1, ge=1, le=MAX_PAGE, description="Page number, starting at 1"),
    limit: int = Query(10, ge=1, le=MAX_LIMIT, description="Page size"),
    category: Optional[VehicleCategory] = Query(None, description="Filter by equipment category"),
    min_price_hour: Optional[float] = Query(None, alias="minPriceHour", ge=0, description="Minimum hourly rate"),
    max_price_hour: Optional[float] = Query(None, alias="maxPriceHour", ge=0, description="Maximum hourly rate"),
    min_price_day: Optional[float] = Query(None, alias="minPriceDay", ge=0, description="Minimum daily rate"),
    max_price_day: Optional[float] = Query(None, alias="maxPriceDay", ge=0, description="Maximum daily rate"),
    city: Optional[str] = Query(None, min_length=1, description="City (partial, case-insensitive match)"),
    state: Optional[str] = Query(None, min_length=1, description="State (partial, case-insensitive match)"),
    search: Optional[str] = Query(None, min_length=1, description="Search term for name, description, type and model"),
    sort: Optional[str] = Query(None, description="price_hour_asc, price_hour_desc, price_day_asc, price_day_desc, rating or newest"),
) -> ListingCriteria:
    """
    Build vehicle listing criteria from query parameters.

    This function can be used as a dependency in FastAPI routes.
    """
    return ListingCriteria(
        category=category.value if category else None,
        price_ranges={
            "price_per_hour": PriceRange(min_price_hour, max_price_hour),
            "price_per_day": PriceRange(min_price_day, max_price_day),
        },
        location={"city": city, "state": state},
        search=search,
        sort=sort,
        page=page,
        page_size=limit,
    )


def get_material_criteria(
    page: int = Query(1, ge=1, le=MAX_PAGE, description="Page number, starting at 1"),
    limit: int = Query(10, ge=1, le=MAX_LIMIT, description="Page size"),
    category: Optional[MaterialCategory] = Query(None, description="Filter by material category"),
    min_price: Optional[float] = Query(None, alias="minPrice", ge=0, description="Minimum unit price"),
    max_price: Optional[float] = Query(None, alias="maxPrice", ge=0, description="Maximum unit price"),
    search: Optional[str] = Query(None, min_length=1, description="Search term for name and description"),
    sort: Optional[str] = Query(None, description="price_asc, price_desc, rating or newest"),
) -> ListingCriteria:
    """Build material listing criteria from query parameters."""
    return ListingCriteria(
        category=category.value if category else None,
        price_ranges={"price_per_unit": PriceRange(min_price, max_price)},
        search=search,
        sort=sort,
        page=page,
        page_size=limit,
    )
