from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.selection_decision import SelectionDecision


class SelectionDecisionsRepository(Protocol):
    async def get(self, farm_id: UUID, animal_id: UUID) -> SelectionDecision | None: ...

    async def upsert(self, decision: SelectionDecision) -> SelectionDecision: ...

    async def delete(self, farm_id: UUID, animal_id: UUID) -> bool: ...

    async def list(
        self,
        farm_id: UUID,
        *,
        animal_ids: list[UUID] | None = None,
        limit: int | None = None,
    ) -> list[SelectionDecision]: ...
