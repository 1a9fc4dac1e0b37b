"""Villa request/response schemas - REST API contract.

JSON uses camelCase (``imageUrl``); snake_case names are accepted on input too.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class VillaSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class VillaBase(VillaSchema):
    name: str = Field(..., min_length=1, max_length=30)
    details: str | None = None
    rate: float = Field(0.0, ge=0)
    sqft: int = Field(0, ge=0)
    occupancy: int = Field(0, ge=0)
    image_url: str | None = None
    amenity: str | None = None


class VillaCreateDTO(VillaBase):
    """Create shape: the store assigns the id."""


class VillaUpdateDTO(VillaBase):
    """Full-replace shape. Also the projection patch operations are applied to."""

    id: int


class VillaDTO(VillaBase):
    """Read shape. Audit timestamps stay internal."""

    id: int
