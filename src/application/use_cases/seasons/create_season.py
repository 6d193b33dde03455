from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.lookups import require_farm
from src.domain.models.breeding_season import BreedingSeason


@dataclass(slots=True)
class CreateSeasonInput:
    name: str
    start_at: date
    end_at: date


async def execute(uow: UnitOfWork, farm_id: UUID, payload: CreateSeasonInput) -> BreedingSeason:
    name = payload.name.strip() if payload.name else ""
    if not name:
        raise ValidationError("Season name is required")
    if payload.start_at > payload.end_at:
        raise ValidationError("Season start must not be after its end")
    farm = await require_farm(uow, farm_id)
    if not farm.is_seasonal:
        raise ValidationError("Farm is not in breeding season mode")
    season = BreedingSeason.create(
        farm_id=farm_id, name=name, start_at=payload.start_at, end_at=payload.end_at
    )
    return await uow.seasons.add(season)
