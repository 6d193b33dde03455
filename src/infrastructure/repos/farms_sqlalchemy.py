from __future__ import annotations

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.farm import Farm
from src.domain.value_objects.repro_mode import ReproMode
from src.infrastructure.db.orm.farm import FarmORM


class FarmsSQLAlchemyRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: FarmORM) -> Farm:
        return Farm(
            id=orm.id,
            name=orm.name,
            repro_mode=ReproMode(orm.repro_mode),
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, farm: Farm) -> Farm:
        orm = FarmORM(
            id=farm.id,
            name=farm.name,
            repro_mode=farm.repro_mode.value,
            created_at=farm.created_at,
            updated_at=farm.updated_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, farm_id: UUID) -> Farm | None:
        orm = await self.session.get(FarmORM, farm_id)
        return self._to_domain(orm) if orm else None

    async def update(self, farm: Farm) -> Farm:
        orm = await self.session.get(FarmORM, farm.id)
        if not orm:
            raise ValueError(f"Farm {farm.id} not found")
        orm.repro_mode = farm.repro_mode.value
        orm.updated_at = farm.updated_at
        await self.session.flush()
        return self._to_domain(orm)
