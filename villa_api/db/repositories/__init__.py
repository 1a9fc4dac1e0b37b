# Repository pattern: abstract data access (SOLID - Dependency Inversion)

from villa_api.db.repositories.base_repository import BaseRepository
from villa_api.db.repositories.interfaces import AbstractRepository, AbstractVillaRepository
from villa_api.db.repositories.villa_repository import VillaRepository

__all__ = ["AbstractRepository", "AbstractVillaRepository", "BaseRepository", "VillaRepository"]
