"""
Base repository - generic SQLAlchemy implementation of the repository contract.
Challenge: Consistent data access, store failures surfaced as StoreError, queries in one place.
"""

import logging
from typing import Generic, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from villa_api.core.exceptions import NotFoundError, StoreError
from villa_api.db.base import Base
from villa_api.db.repositories.interfaces import AbstractRepository, Filters

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(AbstractRepository[ModelType], Generic[ModelType]):
    """Generic async repository. Subclasses add model-specific lookups."""

    def __init__(self, session: AsyncSession, model: type[ModelType]):
        self.session = session
        self.model = model

    def _select(self, filters: Filters | None) -> Select:
        stmt = select(self.model)
        for field, value in (filters or {}).items():
            column = getattr(self.model, field)
            if isinstance(value, str):
                # Both sides use the store's lower(). SQLite's built-in folds ASCII only; see register_sqlite_functions
                stmt = stmt.where(func.lower(column) == func.lower(value))
            else:
                stmt = stmt.where(column == value)
        return stmt.order_by(self.model.id)

    async def _store_failure(self, action: str, exc: SQLAlchemyError) -> StoreError:
        """Roll back so the session stays usable, then wrap the error."""
        logger.warning("%s %s failed: %s", self.model.__name__, action, exc)
        await self.session.rollback()
        return StoreError(str(exc))

    async def get_all(self, filters: Filters | None = None) -> list[ModelType]:
        try:
            result = await self.session.execute(self._select(filters))
            return list(result.scalars().all())
        except SQLAlchemyError as exc:
            raise await self._store_failure("get_all", exc) from exc

    async def get(self, filters: Filters | None = None, tracked: bool = True) -> ModelType | None:
        try:
            result = await self.session.execute(self._select(filters).limit(1))
            entity = result.scalars().first()
        except SQLAlchemyError as exc:
            raise await self._store_failure("get", exc) from exc
        if entity is not None and not tracked:
            self.session.expunge(entity)
        return entity

    async def create(self, entity: ModelType) -> ModelType:
        """Persist new entity and commit. Refresh loads the generated id and timestamps."""
        try:
            self.session.add(entity)
            await self.session.flush()
            await self.session.refresh(entity)
            await self.save()
        except SQLAlchemyError as exc:
            raise await self._store_failure("create", exc) from exc
        return entity

    async def update(self, entity: ModelType) -> ModelType:
        """Copy the attributes set on ``entity`` onto the stored row with the same id."""
        try:
            if await self.session.get(self.model, entity.id) is None:
                raise NotFoundError(f"{self.model.__name__} {entity.id} not found")
            merged = await self.session.merge(entity)
            await self.session.flush()
            await self.session.refresh(merged)
            await self.save()
        except SQLAlchemyError as exc:
            raise await self._store_failure("update", exc) from exc
        return merged

    async def remove(self, entity: ModelType) -> None:
        try:
            stored = await self.session.get(self.model, entity.id)
            if stored is not None:
                await self.session.delete(stored)
            await self.save()
        except SQLAlchemyError as exc:
            raise await self._store_failure("remove", exc) from exc

    async def save(self) -> None:
        await self.session.commit()
