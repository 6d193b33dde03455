from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.animal import Animal


class AnimalRepository(Protocol):
    async def get(self, farm_id: UUID, animal_id: UUID) -> Animal | None: ...

    async def list(
        self,
        farm_id: UUID,
        *,
        sex: str | None = None,
        search: str | None = None,
        ids: list[UUID] | None = None,
    ) -> list[Animal]: ...
