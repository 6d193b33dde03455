from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID, uuid4

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.breeding_season import SeasonExposure
from src.infrastructure.db.orm.breeding_season import SeasonExposureORM


class SeasonExposuresSQLAlchemyRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: SeasonExposureORM) -> SeasonExposure:
        return SeasonExposure(
            id=orm.id,
            season_id=orm.season_id,
            animal_id=orm.animal_id,
            created_at=orm.created_at,
        )

    async def list(self, season_id: UUID) -> list[SeasonExposure]:
        stmt = (
            select(SeasonExposureORM)
            .where(SeasonExposureORM.season_id == season_id)
            .order_by(SeasonExposureORM.created_at)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def animal_ids(self, season_id: UUID) -> set[UUID]:
        stmt = select(SeasonExposureORM.animal_id).where(SeasonExposureORM.season_id == season_id)
        result = await self.session.execute(stmt)
        return set(result.scalars().all())

    async def add_many(self, season_id: UUID, animal_ids: list[UUID]) -> int:
        """Insert the missing memberships and return how many were created."""
        existing = await self.animal_ids(season_id)
        now = datetime.now(timezone.utc)
        created = 0
        for animal_id in dict.fromkeys(animal_ids):
            if animal_id in existing:
                continue
            self.session.add(
                SeasonExposureORM(
                    id=uuid4(), season_id=season_id, animal_id=animal_id, created_at=now
                )
            )
            created += 1
        if created:
            await self.session.flush()
        return created

    async def remove(self, season_id: UUID, animal_id: UUID) -> bool:
        stmt = (
            delete(SeasonExposureORM)
            .where(SeasonExposureORM.season_id == season_id)
            .where(SeasonExposureORM.animal_id == animal_id)
        )
        result = await self.session.execute(stmt)
        return bool(result.rowcount)

    async def count(self, season_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(SeasonExposureORM)
            .where(SeasonExposureORM.season_id == season_id)
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one() or 0)
