"""Endpoints scoped to the calling user's own account"""

from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.shared.auth.dependencies import get_current_principal
from backend.shared.auth.principal import Principal
from backend.shared.config.logging_config import get_logger
from backend.shared.database.session import get_db
from backend.shared.services.user_service import UserService
from backend.services.api.src.schemas.user import OrderResponse, ProfileUpdate, UserResponse

router = APIRouter(prefix="/users", tags=["users"])
logger = get_logger(__name__)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


@router.get("/profile", summary="Get the current user's profile")
def get_profile(
    principal: Principal = Depends(get_current_principal),
    service: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    user = service.get_profile(principal)
    return {"success": True, "user": UserResponse.model_validate(user).to_json()}


@router.put("/profile", summary="Update the current user's profile")
def update_profile(
    update_data: ProfileUpdate,
    principal: Principal = Depends(get_current_principal),
    service: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    """
    Replace name, email and phone of the current user, and the address when one is sent.

    The email may not belong to another account.
    """
    user = service.update_profile(principal, update_data.model_dump(exclude_unset=True))
    return {"success": True, "user": UserResponse.model_validate(user).to_json()}


@router.get("/orders", summary="Get the current user's service requests")
def get_orders(
    principal: Principal = Depends(get_current_principal),
    service: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    """Service requests of the current user, newest first."""
    orders = service.orders(principal)
    return {
        "success": True,
        "data": [OrderResponse.model_validate(order).to_json() for order in orders],
    }


@router.delete("/account", summary="Delete the current user's account")
def delete_account(
    principal: Principal = Depends(get_current_principal),
    service: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    """Delete the current user's service requests, then the account."""
    service.delete_account(principal)
    logger.info(f"User {principal.id} deleted their account")
    return {"success": True, "message": "User account deleted successfully"}
