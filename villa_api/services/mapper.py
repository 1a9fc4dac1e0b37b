"""
Object-to-object mapping by field-name correspondence (entity <-> transfer shapes).
"""

from typing import Any, TypeVar

from pydantic import BaseModel
from sqlalchemy import inspect

from villa_api.db.base import Base

T = TypeVar("T")


def _source_values(source: Any) -> dict[str, Any]:
    if isinstance(source, BaseModel):
        return source.model_dump()
    if isinstance(source, Base):
        return {attr.key: getattr(source, attr.key) for attr in inspect(type(source)).column_attrs}
    return dict(vars(source))


def map_to(source: Any, target_cls: type[T]) -> T:
    """Build a ``target_cls`` instance from the fields ``source`` has in common with it.

    Fields missing on the source are left to the target's defaults.
    """
    values = _source_values(source)
    if issubclass(target_cls, BaseModel):
        return target_cls.model_validate(values)
    if issubclass(target_cls, Base):
        columns = {attr.key for attr in inspect(target_cls).column_attrs}
        return target_cls(**{k: v for k, v in values.items() if k in columns})
    raise TypeError(f"No mapping to {target_cls.__name__}")
