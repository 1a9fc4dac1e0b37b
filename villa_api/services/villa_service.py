"""
Villa service - request handling logic for the villa resource (SOLID: Single Responsibility).
Challenge: Input validation, uniqueness check, entity <-> DTO mapping; keep controllers thin.
Design: Depends on the repository abstraction; tests run it against an in-memory double.
"""

import logging

from villa_api.core.exceptions import ConflictError, NotFoundError, ValidationError
from villa_api.db.models.villa import Villa
from villa_api.db.repositories.interfaces import AbstractVillaRepository
from villa_api.schemas.patch import PatchOperation, apply_patch
from villa_api.schemas.villa import VillaCreateDTO, VillaDTO, VillaUpdateDTO
from villa_api.services.mapper import map_to

logger = logging.getLogger(__name__)


def _require_positive_id(id: int) -> None:
    if id <= 0:
        raise ValidationError(f"Invalid villa id {id}")


class VillaService:
    """Handles the six villa use cases. Raises domain exceptions; never builds HTTP responses."""

    def __init__(self, villa_repo: AbstractVillaRepository):
        self.villa_repo = villa_repo

    async def _get_existing(self, id: int, tracked: bool = True) -> Villa:
        villa = await self.villa_repo.get({"id": id}, tracked=tracked)
        if villa is None:
            raise NotFoundError(f"Villa {id} not found")
        return villa

    async def list_villas(self) -> list[VillaDTO]:
        villas = await self.villa_repo.get_all()
        return [map_to(v, VillaDTO) for v in villas]

    async def get_by_id(self, id: int) -> VillaDTO:
        _require_positive_id(id)
        return map_to(await self._get_existing(id), VillaDTO)

    async def create(self, data: VillaCreateDTO) -> VillaDTO:
        """Reject duplicate names (case-insensitive), then persist.

        Check-then-insert is not atomic: two concurrent creates with the same
        name can both succeed.
        """
        if await self.villa_repo.get_by_name(data.name) is not None:
            logger.info("Rejected villa create: name %r already exists", data.name)
            raise ConflictError("name", "Villa already exists")
        villa = await self.villa_repo.create(map_to(data, Villa))
        logger.info("Created villa id=%s name=%r", villa.id, villa.name)
        return map_to(villa, VillaDTO)

    async def delete(self, id: int) -> None:
        _require_positive_id(id)
        villa = await self._get_existing(id)
        await self.villa_repo.remove(villa)
        logger.info("Deleted villa id=%s", id)

    async def update(self, id: int, data: VillaUpdateDTO) -> None:
        """Full replace. The id check runs before any lookup."""
        _require_positive_id(id)
        if data.id != id:
            raise ValidationError(f"Villa id {data.id} does not match path id {id}")
        await self._get_existing(id)
        await self.villa_repo.update(map_to(data, Villa))
        logger.info("Updated villa id=%s", id)

    async def patch(self, id: int, operations: list[PatchOperation] | None) -> None:
        """Apply patch operations to the update projection of the stored villa."""
        if operations is None or id == 0:
            raise ValidationError("A patch document and a non-zero id are required")
        villa = await self._get_existing(id, tracked=False)
        patched = apply_patch(map_to(villa, VillaUpdateDTO), operations)
        if patched.id != id:
            raise ValidationError("Villa id cannot be changed")
        await self.villa_repo.update(map_to(patched, Villa))
        logger.info("Patched villa id=%s with %d operation(s)", id, len(operations))
