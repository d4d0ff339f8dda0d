"""Vehicle catalog endpoints"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Path, Query, status
from sqlalchemy.orm import Session

from backend.shared.auth.dependencies import require_partner
from backend.shared.auth.principal import Principal
from backend.shared.config.settings import get_settings
from backend.shared.database.session import get_db
from backend.shared.query.criteria import ListingCriteria
from backend.shared.repositories.catalog_repository import vehicle_repository
from backend.shared.services.catalog_service import CatalogService
from backend.services.api.src.schemas.common import AvailabilityUpdate, validate_payload
from backend.services.api.src.schemas.vehicle import VehicleCreate, VehicleResponse, VehicleUpdate
from backend.services.api.src.validation.listings import get_vehicle_criteria

router = APIRouter(prefix="/vehicles", tags=["vehicles"])


def get_vehicle_service(db: Session = Depends(get_db)) -> CatalogService:
    return CatalogService(db, vehicle_repository)


def _serialize(vehicle) -> Dict[str, Any]:
    return VehicleResponse.model_validate(vehicle).to_json()


@router.get("", summary="List vehicles")
def list_vehicles(
    criteria: ListingCriteria = Depends(get_vehicle_criteria),
    service: CatalogService = Depends(get_vehicle_service),
) -> Dict[str, Any]:
    """
    Get active vehicles with filtering, sorting and pagination.
    """
    vehicles, pagination = service.list(criteria)
    return {
        "success": True,
        "data": [_serialize(vehicle) for vehicle in vehicles],
        "pagination": pagination.to_dict(),
    }


@router.get("/categories/list", summary="List vehicle categories")
def list_vehicle_categories(
    include_unavailable: Optional[bool] = Query(
        None,
        alias="includeUnavailable",
        description="Also count vehicles that are not active. Defaults to the configured behavior.",
    ),
    service: CatalogService = Depends(get_vehicle_service),
) -> Dict[str, Any]:
    """Get the distinct categories of listed vehicles."""
    if include_unavailable is None:
        include_unavailable = get_settings().catalog.categories_include_unavailable
    return {"success": True, "data": service.categories(include_unavailable)}


@router.get("/{vehicle_id}", summary="Get vehicle by ID")
def get_vehicle(
    vehicle_id: int = Path(..., description="ID of the vehicle"),
    service: CatalogService = Depends(get_vehicle_service),
) -> Dict[str, Any]:
    """Get a single vehicle with its owner's details."""
    return {"success": True, "data": _serialize(service.get(vehicle_id))}


@router.post("", status_code=status.HTTP_201_CREATED, summary="List a new vehicle")
def create_vehicle(
    payload: VehicleCreate,
    principal: Principal = Depends(require_partner),
    service: CatalogService = Depends(get_vehicle_service),
) -> Dict[str, Any]:
    """
    Create a vehicle owned by the calling partner.
    """
    vehicle = service.create(principal, payload.model_dump())
    return {
        "success": True,
        "message": "Vehicle created successfully",
        "data": _serialize(vehicle),
    }


@router.put("/{vehicle_id}", summary="Update a vehicle")
def update_vehicle(
    vehicle_id: int = Path(..., description="ID of the vehicle"),
    payload: Dict[str, Any] = Body(..., description="Fields to change"),
    principal: Principal = Depends(require_partner),
    service: CatalogService = Depends(get_vehicle_service),
) -> Dict[str, Any]:
    """
    Partially update a vehicle owned by the calling partner.

    Ownership is checked before the body is validated.
    """
    service.get_owned(principal, vehicle_id, "update")
    changes = validate_payload(VehicleUpdate, payload).model_dump(exclude_unset=True, exclude_none=True)
    vehicle = service.update(principal, vehicle_id, changes)
    return {
        "success": True,
        "message": "Vehicle updated successfully",
        "data": _serialize(vehicle),
    }


@router.delete("/{vehicle_id}", summary="Delete a vehicle")
def delete_vehicle(
    vehicle_id: int = Path(..., description="ID of the vehicle"),
    principal: Principal = Depends(require_partner),
    service: CatalogService = Depends(get_vehicle_service),
) -> Dict[str, Any]:
    service.delete(principal, vehicle_id)
    return {"success": True, "message": "Vehicle deleted successfully"}


@router.post("/{vehicle_id}/availability", summary="Update vehicle availability")
def update_vehicle_availability(
    payload: AvailabilityUpdate,
    vehicle_id: int = Path(..., description="ID of the vehicle"),
    principal: Principal = Depends(require_partner),
    service: CatalogService = Depends(get_vehicle_service),
) -> Dict[str, Any]:
    """Replace the availability window of a vehicle owned by the calling partner."""
    vehicle = service.set_availability(principal, vehicle_id, payload.to_json())
    return {
        "success": True,
        "message": "Vehicle availability updated successfully",
        "data": _serialize(vehicle),
    }
