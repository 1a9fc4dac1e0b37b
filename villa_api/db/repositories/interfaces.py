"""
Repository interface - store-independent CRUD contract (SOLID: Dependency Inversion).

A filter is a mapping of attribute name to value. Every entry must match;
string values match case-insensitively. No filter matches every record.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from villa_api.db.models.villa import Villa

T = TypeVar("T")

Filters = Mapping[str, Any]


class AbstractRepository(ABC, Generic[T]):
    """Abstract data access over one entity type."""

    @abstractmethod
    async def get_all(self, filters: Filters | None = None) -> list[T]:
        """Return all matching records. An empty result is not an error."""

    @abstractmethod
    async def get(self, filters: Filters | None = None, tracked: bool = True) -> T | None:
        """Return the first matching record, or None.

        With ``tracked=False`` the returned instance is detached: later
        changes to it are not written back unless passed to ``update``.
        """

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Persist a new record and return it with its generated id."""

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Overwrite the record with ``entity.id``. Raises NotFoundError if absent."""

    @abstractmethod
    async def remove(self, entity: T) -> None:
        """Delete the record with ``entity.id``."""

    @abstractmethod
    async def save(self) -> None:
        """Commit pending changes."""


class AbstractVillaRepository(AbstractRepository["Villa"]):
    """Villa repository contract: adds the lookup behind name uniqueness."""

    @abstractmethod
    async def get_by_name(self, name: str) -> "Villa | None":
        """Case-insensitive name lookup. The result is untracked."""
