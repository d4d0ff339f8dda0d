from backend.shared.auth.jwt import JWTHandler, Token
from backend.shared.auth.principal import Principal, is_owner

__all__ = ["JWTHandler", "Token", "Principal", "is_owner"]
