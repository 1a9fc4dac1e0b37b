"""
In-memory villa repository - test double for the repository contract.
Seed data matches the two villas the service has always shipped with.
"""

from datetime import datetime, timezone

from villa_api.core.exceptions import NotFoundError
from villa_api.db.models import Villa
from villa_api.db.repositories.interfaces import AbstractVillaRepository, Filters
from villa_api.services.mapper import map_to


def _matches(villa: Villa, filters: Filters | None) -> bool:
    for field, value in (filters or {}).items():
        current = getattr(villa, field)
        if isinstance(value, str) and isinstance(current, str):
            if current.lower() != value.lower():
                return False
        elif current != value:
            return False
    return True


class InMemoryVillaRepository(AbstractVillaRepository):
    """Writes are immediate; ``save`` only counts calls. Untracked reads return copies."""

    def __init__(self):
        self.rows: dict[int, Villa] = {}
        self._next_id = 1
        self.saves = 0

    @classmethod
    def seeded(cls) -> "InMemoryVillaRepository":
        repo = cls()
        for villa in (
            Villa(name="Pool View", rate=0.0, occupancy=4, sqft=100),
            Villa(name="Beach View", rate=0.0, occupancy=3, sqft=100),
        ):
            repo._insert(villa)
        return repo

    def _insert(self, villa: Villa) -> Villa:
        now = datetime.now(timezone.utc)
        villa.id = self._next_id
        villa.created_date = now
        villa.updated_date = now
        self._next_id += 1
        self.rows[villa.id] = villa
        return villa

    async def get_all(self, filters: Filters | None = None) -> list[Villa]:
        return [v for _, v in sorted(self.rows.items()) if _matches(v, filters)]

    async def get(self, filters: Filters | None = None, tracked: bool = True) -> Villa | None:
        for villa in await self.get_all(filters):
            return villa if tracked else map_to(villa, Villa)
        return None

    async def create(self, entity: Villa) -> Villa:
        return self._insert(entity)

    async def update(self, entity: Villa) -> Villa:
        stored = self.rows.get(entity.id)
        if stored is None:
            raise NotFoundError(f"Villa {entity.id} not found")
        for field in ("name", "details", "rate", "sqft", "occupancy", "image_url", "amenity"):
            setattr(stored, field, getattr(entity, field))
        stored.updated_date = datetime.now(timezone.utc)
        return stored

    async def remove(self, entity: Villa) -> None:
        self.rows.pop(entity.id, None)

    async def get_by_name(self, name: str) -> Villa | None:
        return await self.get({"name": name}, tracked=False)

    async def save(self) -> None:
        self.saves += 1
