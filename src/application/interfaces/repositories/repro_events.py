from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.repro_event import ReproEvent


class ReproEventsRepository(Protocol):
    async def add(self, event: ReproEvent) -> ReproEvent: ...

    async def list(
        self,
        farm_id: UUID,
        *,
        animal_id: UUID | None = None,
        season_id: UUID | None = None,
    ) -> list[ReproEvent]: ...

    async def list_for_animals(
        self, farm_id: UUID, animal_ids: list[UUID]
    ) -> dict[UUID, list[ReproEvent]]: ...

    async def count_by_season(self, season_id: UUID) -> int: ...
