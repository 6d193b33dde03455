from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.lookups import require_season
from src.domain.models.breeding_season import BreedingSeason


@dataclass(slots=True)
class UpdateSeasonInput:
    name: str | None = None
    start_at: date | None = None
    end_at: date | None = None


async def execute(
    uow: UnitOfWork, farm_id: UUID, season_id: UUID, payload: UpdateSeasonInput
) -> BreedingSeason:
    season = await require_season(uow, farm_id, season_id)
    start_at = payload.start_at or season.start_at
    end_at = payload.end_at or season.end_at
    if start_at > end_at:
        raise ValidationError("Season start must not be after its end")
    name = payload.name.strip() if payload.name else ""
    season.name = name or season.name
    season.start_at = start_at
    season.end_at = end_at
    season.touch()
    return await uow.seasons.update(season)
