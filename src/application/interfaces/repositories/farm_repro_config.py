from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.farm_repro_config import FarmReproConfig


class FarmReproConfigRepository(Protocol):
    async def get(self, farm_id: UUID) -> FarmReproConfig | None: ...
    async def upsert(self, config: FarmReproConfig) -> FarmReproConfig: ...
