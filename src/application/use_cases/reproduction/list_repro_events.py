from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.lookups import require_animal, require_farm, require_season
from src.domain.models.repro_event import ReproEvent


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    animal_id: UUID | None = None,
    season_id: UUID | None = None,
) -> list[ReproEvent]:
    await require_farm(uow, farm_id)
    if animal_id:
        await require_animal(uow, farm_id, animal_id)
    if season_id:
        await require_season(uow, farm_id, season_id)
    return await uow.repro_events.list(farm_id, animal_id=animal_id, season_id=season_id)
