from backend.services.api.src.schemas.common import (
    AvailabilityUpdate,
    CamelModel,
    PartnerSummary,
    format_validation_errors,
    validate_payload,
)
from backend.services.api.src.schemas.vehicle import (
    VehicleCreate,
    VehicleUpdate,
    VehicleResponse,
)
from backend.services.api.src.schemas.material import (
    MaterialCreate,
    MaterialUpdate,
    MaterialResponse,
)
from backend.services.api.src.schemas.user import (
    OrderResponse,
    ProfileUpdate,
    UserResponse,
)

__all__ = [
    "AvailabilityUpdate",
    "CamelModel",
    "PartnerSummary",
    "format_validation_errors",
    "validate_payload",
    "VehicleCreate",
    "VehicleUpdate",
    "VehicleResponse",
    "MaterialCreate",
    "MaterialUpdate",
    "MaterialResponse",
    "OrderResponse",
    "ProfileUpdate",
    "UserResponse",
]
