from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import EmailStr, Field

from backend.services.api.src.schemas.common import CamelModel


class UserResponse(CamelModel):
    """Public view of an account. The password hash is never exposed."""
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    address: Optional[Dict[str, Any]] = None
    role: str
    created_at: datetime
    updated_at: datetime


class ProfileUpdate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100, description="Name is required")
    email: EmailStr = Field(..., description="Please include a valid email")
    phone: str = Field(..., min_length=1, max_length=50, description="Phone number is required")
    address: Optional[Dict[str, Any]] = None


class OrderVehicle(CamelModel):
    id: int
    name: str
    category: str
    price_per_hour: float
    price_per_day: float


class OrderMaterial(CamelModel):
    id: int
    name: str
    category: str
    price_per_unit: float
    unit: str


class OrderResponse(CamelModel):
    """A service request with the vehicle or material it refers to."""
    id: int
    status: str
    quantity: Optional[int] = None
    request_date: datetime
    notes: Optional[str] = None
    vehicle_id: Optional[int] = None
    material_id: Optional[int] = None
    vehicle: Optional[OrderVehicle] = None
    material: Optional[OrderMaterial] = None
