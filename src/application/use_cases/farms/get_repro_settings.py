from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.lookups import resolve_thresholds
from src.domain.value_objects.repro_thresholds import ReproThresholds


async def execute(uow: UnitOfWork, farm_id: UUID, defaults: ReproThresholds) -> ReproThresholds:
    return await resolve_thresholds(uow, farm_id, defaults)
