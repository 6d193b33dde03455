from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.lookups import require_season


async def execute(uow: UnitOfWork, farm_id: UUID, season_id: UUID, animal_id: UUID) -> bool:
    season = await require_season(uow, farm_id, season_id)
    return await uow.exposures.remove(season.id, animal_id)
