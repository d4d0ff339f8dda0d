from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from backend.shared.models.catalog import VehicleCategory, VehicleStatus
from backend.services.api.src.schemas.common import CamelModel, PartnerSummary


def _check_year(v: Optional[int]) -> Optional[int]:
    if v is not None and v > datetime.now(timezone.utc).year + 1:
        raise ValueError("year cannot be later than next year")
    return v


class VehicleCreate(CamelModel):
    """Model for listing a new vehicle."""
    name: str = Field(..., min_length=2, max_length=100, description="Display name")
    description: str = Field(..., min_length=10, max_length=500, description="Description of the vehicle")
    category: VehicleCategory = Field(..., description="Equipment category")
    type: str = Field(..., min_length=2, description="Equipment type")
    model: str = Field(..., min_length=2, description="Manufacturer model")
    year: int = Field(..., ge=1990, description="Year of manufacture")
    price_per_hour: float = Field(..., ge=0, description="Hourly rate")
    price_per_day: float = Field(..., ge=0, description="Daily rate")
    city: Optional[str] = Field(None, max_length=100)
    state: Optional[str] = Field(None, max_length=100)
    status: VehicleStatus = Field(VehicleStatus.ACTIVE, description="Listing status")
    images: Optional[List[str]] = Field(None, description="Image URLs")
    specifications: Optional[Dict[str, Any]] = Field(None, description="Free-form technical data")

    @field_validator("year")
    @classmethod
    def validate_year(cls, v):
        """Validate that the year is not later than next year."""
        return _check_year(v)


class VehicleUpdate(CamelModel):
    """Model for a partial vehicle update. Only supplied fields change."""
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    description: Optional[str] = Field(None, min_length=10, max_length=500)
    category: Optional[VehicleCategory] = None
    type: Optional[str] = Field(None, min_length=2)
    model: Optional[str] = Field(None, min_length=2)
    year: Optional[int] = Field(None, ge=1990)
    price_per_hour: Optional[float] = Field(None, ge=0)
    price_per_day: Optional[float] = Field(None, ge=0)
    city: Optional[str] = Field(None, max_length=100)
    state: Optional[str] = Field(None, max_length=100)
    status: Optional[VehicleStatus] = None
    images: Optional[List[str]] = None
    specifications: Optional[Dict[str, Any]] = None

    @field_validator("year")
    @classmethod
    def validate_year(cls, v):
        """Validate that the year is not later than next year."""
        return _check_year(v)


class VehicleResponse(CamelModel):
    """Response model for vehicles."""
    id: int
    owner_id: int
    name: str
    description: str
    category: str
    type: str
    model: str
    year: int
    price_per_hour: float
    price_per_day: float
    city: Optional[str] = None
    state: Optional[str] = None
    status: str
    featured: bool
    rating: float
    images: Optional[List[str]] = None
    specifications: Optional[Dict[str, Any]] = None
    availability: Optional[Dict[str, Any]] = None
    created_at: datetime
    updated_at: datetime
    owner: Optional[PartnerSummary] = None
