from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serialized with camelCase keys, the shape the genetics dashboard reads."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class AnimalBrief(CamelModel):
    id: str
    tag: str
    brinco: str
    registry: str | None = None
    name: str | None = None
    breed: str | None = None
    raca: str | None = None
    sex: str | None = None
    lot_id: str | None = None
