from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.lookups import require_farm
from src.domain.models.breeding_season import BreedingSeason


async def execute(uow: UnitOfWork, farm_id: UUID) -> list[BreedingSeason]:
    await require_farm(uow, farm_id)
    return await uow.seasons.list(farm_id)
