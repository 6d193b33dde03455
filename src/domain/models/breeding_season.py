from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class BreedingSeason:
    id: UUID
    farm_id: UUID
    name: str
    start_at: date
    end_at: date
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, farm_id: UUID, name: str, start_at: date, end_at: date) -> BreedingSeason:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            name=name,
            start_at=start_at,
            end_at=end_at,
            created_at=now,
            updated_at=now,
        )

    def contains(self, day: date) -> bool:
        return self.start_at <= day <= self.end_at

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)


@dataclass(slots=True)
class SeasonExposure:
    id: UUID
    season_id: UUID
    animal_id: UUID
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, season_id: UUID, animal_id: UUID) -> SeasonExposure:
        return cls(id=uuid4(), season_id=season_id, animal_id=animal_id)
