from backend.shared.repositories.base import BaseRepository
from backend.shared.repositories.catalog_repository import (
    CatalogRepository,
    material_repository,
    vehicle_repository,
)
from backend.shared.repositories.user_repository import UserRepository, user_repository

__all__ = [
    "BaseRepository",
    "CatalogRepository",
    "material_repository",
    "vehicle_repository",
    "UserRepository",
    "user_repository",
]
