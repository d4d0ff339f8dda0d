"""Material catalog endpoints"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Path, Query, status
from sqlalchemy.orm import Session

from backend.shared.auth.dependencies import require_partner
from backend.shared.auth.principal import Principal
from backend.shared.config.settings import get_settings
from backend.shared.database.session import get_db
from backend.shared.query.criteria import ListingCriteria
from backend.shared.repositories.catalog_repository import material_repository
from backend.shared.services.catalog_service import CatalogService
from backend.services.api.src.schemas.common import AvailabilityUpdate, validate_payload
from backend.services.api.src.schemas.material import MaterialCreate, MaterialResponse, MaterialUpdate
from backend.services.api.src.validation.listings import get_material_criteria

router = APIRouter(prefix="/materials", tags=["materials"])


def get_material_service(db: Session = Depends(get_db)) -> CatalogService:
    return CatalogService(db, material_repository)


def _serialize(material) -> Dict[str, Any]:
    return MaterialResponse.model_validate(material).to_json()


@router.get("", summary="List materials")
def list_materials(
    criteria: ListingCriteria = Depends(get_material_criteria),
    service: CatalogService = Depends(get_material_service),
) -> Dict[str, Any]:
    """
    Get available materials with filtering, sorting and pagination.
    """
    materials, pagination = service.list(criteria)
    return {
        "success": True,
        "data": [_serialize(material) for material in materials],
        "pagination": pagination.to_dict(),
    }


@router.get("/categories/list", summary="List material categories")
def list_material_categories(
    include_unavailable: Optional[bool] = Query(
        None,
        alias="includeUnavailable",
        description="Also count materials that are not available. Defaults to the configured behavior.",
    ),
    service: CatalogService = Depends(get_material_service),
) -> Dict[str, Any]:
    if include_unavailable is None:
        include_unavailable = get_settings().catalog.categories_include_unavailable
    return {"success": True, "data": service.categories(include_unavailable)}


@router.get("/{material_id}", summary="Get material by ID")
def get_material(
    material_id: int = Path(..., description="ID of the material"),
    service: CatalogService = Depends(get_material_service),
) -> Dict[str, Any]:
    """Get a single material with its supplier's details."""
    return {"success": True, "data": _serialize(service.get(material_id))}


@router.post("", status_code=status.HTTP_201_CREATED, summary="List a new material")
def create_material(
    payload: MaterialCreate,
    principal: Principal = Depends(require_partner),
    service: CatalogService = Depends(get_material_service),
) -> Dict[str, Any]:
    """Create a material supplied by the calling partner."""
    material = service.create(principal, payload.model_dump())
    return {
        "success": True,
        "message": "Material created successfully",
        "data": _serialize(material),
    }


@router.put("/{material_id}", summary="Update a material")
def update_material(
    material_id: int = Path(..., description="ID of the material"),
    payload: Dict[str, Any] = Body(..., description="Fields to change"),
    principal: Principal = Depends(require_partner),
    service: CatalogService = Depends(get_material_service),
) -> Dict[str, Any]:
    """
    Partially update a material supplied by the calling partner.

    Ownership is checked before the body is validated.
    """
    service.get_owned(principal, material_id, "update")
    changes = validate_payload(MaterialUpdate, payload).model_dump(exclude_unset=True, exclude_none=True)
    material = service.update(principal, material_id, changes)
    return {
        "success": True,
        "message": "Material updated successfully",
        "data": _serialize(material),
    }


@router.delete("/{material_id}", summary="Delete a material")
def delete_material(
    material_id: int = Path(..., description="ID of the material"),
    principal: Principal = Depends(require_partner),
    service: CatalogService = Depends(get_material_service),
) -> Dict[str, Any]:
    service.delete(principal, material_id)
    return {"success": True, "message": "Material deleted successfully"}


@router.post("/{material_id}/availability", summary="Update material availability")
def update_material_availability(
    payload: AvailabilityUpdate,
    material_id: int = Path(..., description="ID of the material"),
    principal: Principal = Depends(require_partner),
    service: CatalogService = Depends(get_material_service),
) -> Dict[str, Any]:
    material = service.set_availability(principal, material_id, payload.to_json())
    return {
        "success": True,
        "message": "Material availability updated successfully",
        "data": _serialize(material),
    }
