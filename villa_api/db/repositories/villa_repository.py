"""
Villa repository - villa data access on top of the generic base.
"""

from villa_api.db.models.villa import Villa
from villa_api.db.repositories.base_repository import BaseRepository
from villa_api.db.repositories.interfaces import AbstractVillaRepository


class VillaRepository(BaseRepository[Villa], AbstractVillaRepository):
    """Villa-specific queries."""

    def __init__(self, session):
        super().__init__(session, Villa)

    async def get_by_name(self, name: str) -> Villa | None:
        """Case-insensitive name lookup - used for the uniqueness check on create."""
        return await self.get({"name": name}, tracked=False)
