from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from uuid import UUID


class AnimalSex(str, Enum):
    FEMEA = "FEMEA"
    MACHO = "MACHO"


@dataclass(slots=True)
class Animal:
    id: UUID
    farm_id: UUID
    tag: str
    sex: str = AnimalSex.FEMEA.value
    name: str | None = None
    registry: str | None = None  # P.O. herd book number
    breed: str | None = None
    birth_date: date | None = None
    lot_id: UUID | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_female(self) -> bool:
        return self.sex == AnimalSex.FEMEA.value

    def matches(self, term: str) -> bool:
        needle = term.strip().lower()
        if not needle:
            return True
        return needle in self.tag.lower() or needle in (self.registry or "").lower()
