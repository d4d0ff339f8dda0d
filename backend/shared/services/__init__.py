from backend.shared.services.catalog_service import CatalogService
from backend.shared.services.user_service import UserService

__all__ = ["CatalogService", "UserService"]
