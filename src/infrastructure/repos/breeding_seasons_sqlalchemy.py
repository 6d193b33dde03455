from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.breeding_season import BreedingSeason
from src.infrastructure.db.orm.breeding_season import BreedingSeasonORM


class BreedingSeasonsSQLAlchemyRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: BreedingSeasonORM) -> BreedingSeason:
        return BreedingSeason(
            id=orm.id,
            farm_id=orm.farm_id,
            name=orm.name,
            start_at=orm.start_at,
            end_at=orm.end_at,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, season: BreedingSeason) -> BreedingSeason:
        orm = BreedingSeasonORM(
            id=season.id,
            farm_id=season.farm_id,
            name=season.name,
            start_at=season.start_at,
            end_at=season.end_at,
            created_at=season.created_at,
            updated_at=season.updated_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def update(self, season: BreedingSeason) -> BreedingSeason:
        orm = await self.session.get(BreedingSeasonORM, season.id)
        if not orm:
            raise ValueError(f"Breeding season {season.id} not found")
        orm.name = season.name
        orm.start_at = season.start_at
        orm.end_at = season.end_at
        orm.updated_at = season.updated_at
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, farm_id: UUID, season_id: UUID) -> BreedingSeason | None:
        stmt = (
            select(BreedingSeasonORM)
            .where(BreedingSeasonORM.farm_id == farm_id)
            .where(BreedingSeasonORM.id == season_id)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(self, farm_id: UUID) -> list[BreedingSeason]:
        stmt = (
            select(BreedingSeasonORM)
            .where(BreedingSeasonORM.farm_id == farm_id)
            .order_by(BreedingSeasonORM.start_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def delete(self, season: BreedingSeason) -> None:
        orm = await self.session.get(BreedingSeasonORM, season.id)
        if orm:
            await self.session.delete(orm)
            await self.session.flush()
