from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from backend.shared.models.catalog import MaterialCategory, MaterialUnit
from backend.services.api.src.schemas.common import CamelModel, PartnerSummary


class MaterialCreate(CamelModel):
    """Model for listing a new material."""
    name: str = Field(..., min_length=2, max_length=100, description="Display name")
    description: str = Field(..., min_length=10, max_length=500, description="Description of the material")
    category: MaterialCategory = Field(..., description="Material category")
    price_per_unit: float = Field(..., ge=0, description="Price for one unit")
    unit: MaterialUnit = Field(..., description="Unit the price refers to")
    available_quantity: float = Field(..., ge=0, description="Quantity in stock")
    is_available: bool = Field(True, description="Whether the material is publicly listed")
    images: Optional[List[str]] = Field(None, description="Image URLs")


class MaterialUpdate(CamelModel):
    """Model for a partial material update. Only supplied fields change."""
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    description: Optional[str] = Field(None, min_length=10, max_length=500)
    category: Optional[MaterialCategory] = None
    price_per_unit: Optional[float] = Field(None, ge=0)
    unit: Optional[MaterialUnit] = None
    available_quantity: Optional[float] = Field(None, ge=0)
    is_available: Optional[bool] = None
    images: Optional[List[str]] = None


class MaterialResponse(CamelModel):
    """Response model for materials."""
    id: int
    supplier_id: int
    name: str
    description: str
    category: str
    price_per_unit: float
    unit: str
    available_quantity: float
    is_available: bool
    featured: bool
    rating: float
    images: Optional[List[str]] = None
    availability: Optional[Dict[str, Any]] = None
    created_at: datetime
    updated_at: datetime
    supplier: Optional[PartnerSummary] = None
