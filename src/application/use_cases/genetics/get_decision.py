from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.selection_decision import SelectionDecision


async def execute(uow: UnitOfWork, farm_id: UUID, animal_id: UUID) -> SelectionDecision | None:
    return await uow.selection_decisions.get(farm_id, animal_id)
