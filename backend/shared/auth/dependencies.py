from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from backend.shared.auth.jwt import JWTHandler
from backend.shared.auth.principal import Principal
from backend.shared.config.logging_config import get_logger
from backend.shared.errors import ForbiddenError, UnauthorizedError

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

_jwt_handler: Optional[JWTHandler] = None


def get_jwt_handler() -> JWTHandler:
    """Return the process-wide JWT handler, creating it on first use."""
    global _jwt_handler
    if _jwt_handler is None:
        _jwt_handler = JWTHandler()
    return _jwt_handler


async def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    jwt_handler: JWTHandler = Depends(get_jwt_handler),
) -> Principal:
    """Dependency to get the acting principal from the bearer token.

    Raises:
        UnauthorizedError: If no token was sent or it does not verify
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("No token, authorization denied")
    return jwt_handler.principal_from_token(credentials.credentials)


async def require_partner(
    principal: Principal = Depends(get_current_principal),
) -> Principal:
    """Dependency that only lets partner accounts through."""
    if not principal.is_partner:
        logger.info(f"Principal {principal.id} denied partner-only access")
        raise ForbiddenError("Access denied. Partner account required")
    return principal
