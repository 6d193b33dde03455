from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.breeding_season import BreedingSeason


class BreedingSeasonsRepository(Protocol):
    async def add(self, season: BreedingSeason) -> BreedingSeason: ...

    async def update(self, season: BreedingSeason) -> BreedingSeason: ...

    async def get(self, farm_id: UUID, season_id: UUID) -> BreedingSeason | None: ...

    async def list(self, farm_id: UUID) -> list[BreedingSeason]: ...

    async def delete(self, season: BreedingSeason) -> None: ...
