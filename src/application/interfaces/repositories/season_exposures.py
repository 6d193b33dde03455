from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.breeding_season import SeasonExposure


class SeasonExposuresRepository(Protocol):
    async def list(self, season_id: UUID) -> list[SeasonExposure]: ...

    async def animal_ids(self, season_id: UUID) -> set[UUID]: ...

    async def add_many(self, season_id: UUID, animal_ids: list[UUID]) -> int: ...

    async def remove(self, season_id: UUID, animal_id: UUID) -> bool: ...

    async def count(self, season_id: UUID) -> int: ...
