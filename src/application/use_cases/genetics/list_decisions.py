from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.lookups import require_farm
from src.domain.models.animal import Animal
from src.domain.models.selection_decision import SelectionDecision


@dataclass(slots=True)
class DecisionView:
    decision: SelectionDecision
    animal: Animal | None


async def execute(uow: UnitOfWork, farm_id: UUID, limit: int | None = None) -> list[DecisionView]:
    await require_farm(uow, farm_id)
    decisions = await uow.selection_decisions.list(farm_id, limit=limit)
    if not decisions:
        return []
    animals = await uow.animals.list(farm_id, ids=[d.animal_id for d in decisions])
    by_id = {animal.id: animal for animal in animals}
    return [DecisionView(decision=d, animal=by_id.get(d.animal_id)) for d in decisions]
