from backend.shared.models.base import Base
from backend.shared.models.catalog import (
    Material,
    MaterialCategory,
    MaterialUnit,
    Partner,
    Vehicle,
    VehicleCategory,
    VehicleStatus,
)
from backend.shared.models.user import ServiceRequest, User

__all__ = [
    "Base",
    "Material",
    "MaterialCategory",
    "MaterialUnit",
    "Partner",
    "ServiceRequest",
    "User",
    "Vehicle",
    "VehicleCategory",
    "VehicleStatus",
]
