import jwt
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jwt.exceptions import PyJWTError
from pydantic import BaseModel

from backend.shared.auth.principal import Principal
from backend.shared.config.settings import AuthConfig, get_settings
from backend.shared.config.logging_config import get_logger
from backend.shared.errors import UnauthorizedError

logger = get_logger(__name__)


class Token(BaseModel):
    """Token model returned to clients"""
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # Seconds until expiration


class JWTHandler:
    """JWT token handler for creating and validating tokens"""

    def __init__(self, config: Optional[AuthConfig] = None):
        """Initialize with the auth section of the settings"""
        self.config = config or get_settings().auth
        self.algorithm = self.config.jwt_algorithm
        self.secret_key = self.config.jwt_secret_key
        self.access_token_expire_minutes = self.config.access_token_expire_minutes

        if not self.secret_key:
            raise ValueError("jwt_secret_key must be configured")

    def create_access_token(self, data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> Token:
        """
        Create a new JWT access token.

        Args:
            data: Claims for the token payload (``sub``, ``role``, ``partner_id``)
            expires_delta: Optional lifetime overriding the configured one

        Returns:
            Token: A Token object with the access token and metadata
        """
        lifetime = expires_delta or timedelta(minutes=self.access_token_expire_minutes)
        to_encode = data.copy()
        if "sub" in to_encode:
            to_encode["sub"] = str(to_encode["sub"])
        to_encode["exp"] = datetime.now(timezone.utc) + lifetime

        encoded_jwt = jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)
        logger.debug(f"Created access token for subject {data.get('sub')}")

        return Token(access_token=encoded_jwt, expires_in=int(lifetime.total_seconds()))

    def decode_token(self, token: str) -> Dict[str, Any]:
        """
        Decode and validate a JWT token.

        Raises:
            UnauthorizedError: If token is invalid or expired
        """
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except PyJWTError as e:
            logger.warning(f"Invalid token: {str(e)}")
            raise UnauthorizedError("Invalid or expired token")

    def principal_from_token(self, token: str) -> Principal:
        """Resolve the acting principal carried by a token."""
        payload = self.decode_token(token)
        try:
            user_id = int(payload["sub"])
        except (KeyError, TypeError, ValueError):
            raise UnauthorizedError("Token has no valid subject")

        partner_id = payload.get("partner_id")
        return Principal(
            id=user_id,
            role=payload.get("role", "user"),
            partner_id=int(partner_id) if partner_id is not None else None,
        )
