from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.lookups import require_season
from src.domain.models.animal import Animal
from src.domain.models.breeding_season import SeasonExposure


@dataclass(slots=True)
class ExposureView:
    exposure: SeasonExposure
    animal: Animal | None


async def execute(uow: UnitOfWork, farm_id: UUID, season_id: UUID) -> list[ExposureView]:
    season = await require_season(uow, farm_id, season_id)
    exposures = await uow.exposures.list(season.id)
    animals = await uow.animals.list(farm_id, ids=[e.animal_id for e in exposures])
    by_id = {animal.id: animal for animal in animals}
    return [ExposureView(exposure=e, animal=by_id.get(e.animal_id)) for e in exposures]
