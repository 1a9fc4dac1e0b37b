"""
Patch operation tests - applying JSON Patch documents to the update projection.
"""

import pytest

from villa_api.core.exceptions import ValidationError
from villa_api.schemas.patch import PatchOperation, apply_patch
from villa_api.schemas.villa import VillaUpdateDTO


@pytest.fixture
def villa() -> VillaUpdateDTO:
    return VillaUpdateDTO(id=1, name="Pool View", details="Sea side", occupancy=4, sqft=100)


def test_replace_returns_new_instance(villa: VillaUpdateDTO):
    patched = apply_patch(villa, [PatchOperation(op="replace", path="/occupancy", value=6)])
    assert patched.occupancy == 6
    assert villa.occupancy == 4


def test_path_matches_alias_and_case(villa: VillaUpdateDTO):
    patched = apply_patch(
        villa,
        [
            PatchOperation(op="add", path="/imageUrl", value="https://img/1.png"),
            PatchOperation(op="replace", path="/Amenity", value="Pool"),
            PatchOperation(op="replace", path="/image_url", value="https://img/2.png"),
        ],
    )
    assert patched.image_url == "https://img/2.png"
    assert patched.amenity == "Pool"


def test_remove_clears_optional_field(villa: VillaUpdateDTO):
    patched = apply_patch(villa, [PatchOperation(op="remove", path="/details")])
    assert patched.details is None


def test_remove_required_field_fails_validation(villa: VillaUpdateDTO):
    with pytest.raises(ValidationError) as excinfo:
        apply_patch(villa, [PatchOperation(op="remove", path="/name")])
    assert excinfo.value.messages[0].startswith("name")


def test_copy_and_move(villa: VillaUpdateDTO):
    patched = apply_patch(
        villa,
        [
            PatchOperation.model_validate({"op": "copy", "from": "/details", "path": "/amenity"}),
            PatchOperation.model_validate({"op": "move", "from": "/details", "path": "/imageUrl"}),
        ],
    )
    assert patched.amenity == "Sea side"
    assert patched.image_url == "Sea side"
    assert patched.details is None


def test_test_operation(villa: VillaUpdateDTO):
    ops = [
        PatchOperation(op="test", path="/occupancy", value=4),
        PatchOperation(op="replace", path="/occupancy", value=5),
    ]
    assert apply_patch(villa, ops).occupancy == 5
    with pytest.raises(ValidationError):
        apply_patch(villa, [PatchOperation(op="test", path="/occupancy", value=3)])


@pytest.mark.parametrize("path", ["/unknown", "occupancy", "/occupancy/extra", ""])
def test_bad_path_is_rejected(villa: VillaUpdateDTO, path: str):
    with pytest.raises(ValidationError):
        apply_patch(villa, [PatchOperation(op="replace", path=path, value=1)])


def test_replace_requires_value(villa: VillaUpdateDTO):
    with pytest.raises(ValidationError):
        apply_patch(villa, [PatchOperation(op="replace", path="/occupancy")])


def test_replace_with_null_value_is_allowed(villa: VillaUpdateDTO):
    patched = apply_patch(villa, [PatchOperation(op="replace", path="/details", value=None)])
    assert patched.details is None
