"""
Patch operations - JSON Patch (RFC 6902) subset over a flat projection.
Challenge: Apply field-level edits without touching the original, then re-validate.
Design: Operations work on a dict dump of the model; the result is validated
back into a new model instance, so an invalid patch never yields a model.
"""

from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from villa_api.core.exceptions import ValidationError, format_validation_error

ModelT = TypeVar("ModelT", bound=BaseModel)


class PatchOperation(BaseModel):
    """One field-level edit, e.g. ``{"op": "replace", "path": "/occupancy", "value": 6}``."""

    model_config = ConfigDict(populate_by_name=True)

    op: Literal["add", "remove", "replace", "copy", "move", "test"]
    path: str
    value: Any = None
    from_: str | None = Field(None, alias="from")


def _field_lookup(model_cls: type[BaseModel]) -> dict[str, str]:
    """Map lower-cased field names and camelCase aliases to field names."""
    lookup = {}
    for name in model_cls.model_fields:
        lookup[name.lower()] = name
        lookup[to_camel(name).lower()] = name
    return lookup


def _resolve(path: str | None, lookup: dict[str, str]) -> str:
    if not path or not path.startswith("/") or "/" in path[1:]:
        raise ValidationError(f"Invalid patch path '{path}'")
    field = lookup.get(path[1:].lower())
    if field is None:
        raise ValidationError(f"The target location specified by path '{path}' was not found")
    return field


def _apply_one(data: dict[str, Any], operation: PatchOperation, lookup: dict[str, str]) -> None:
    target = _resolve(operation.path, lookup)
    if operation.op in ("add", "replace", "test") and "value" not in operation.model_fields_set:
        raise ValidationError(f"'{operation.op}' operation on '{operation.path}' requires a value")

    if operation.op in ("add", "replace"):
        data[target] = operation.value
    elif operation.op == "remove":
        data[target] = None
    elif operation.op == "test":
        if data[target] != operation.value:
            raise ValidationError(f"Test operation failed for path '{operation.path}'")
    else:
        source = _resolve(operation.from_, lookup)
        data[target] = data[source]
        if operation.op == "move" and source != target:
            data[source] = None


def apply_patch(model: ModelT, operations: list[PatchOperation]) -> ModelT:
    """Apply operations in order and return a new, re-validated instance."""
    lookup = _field_lookup(type(model))
    data = model.model_dump()
    for operation in operations:
        _apply_one(data, operation, lookup)
    try:
        return type(model).model_validate(data)
    except PydanticValidationError as exc:
        messages = [format_validation_error(err) for err in exc.errors()]
        raise ValidationError(messages[0], messages=messages) from exc

