from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.animal import Animal
from src.infrastructure.db.orm.animal import AnimalORM


class AnimalsSQLAlchemyRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AnimalORM) -> Animal:
        return Animal(
            id=orm.id,
            farm_id=orm.farm_id,
            tag=orm.tag,
            sex=orm.sex,
            name=orm.name,
            registry=orm.registry_number,
            breed=orm.breed,
            birth_date=orm.birth_date,
            lot_id=orm.lot_id,
            created_at=orm.created_at,
        )

    async def get(self, farm_id: UUID, animal_id: UUID) -> Animal | None:
        stmt = (
            select(AnimalORM)
            .where(AnimalORM.farm_id == farm_id)
            .where(AnimalORM.id == animal_id)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        farm_id: UUID,
        *,
        sex: str | None = None,
        search: str | None = None,
        ids: list[UUID] | None = None,
    ) -> list[Animal]:
        if ids is not None and not ids:
            return []
        stmt = select(AnimalORM).where(AnimalORM.farm_id == farm_id)
        if sex:
            stmt = stmt.where(AnimalORM.sex == sex)
        if ids is not None:
            stmt = stmt.where(AnimalORM.id.in_(ids))
        if search:
            pattern = f"%{search.strip().lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(AnimalORM.tag).like(pattern),
                    func.lower(func.coalesce(AnimalORM.registry_number, "")).like(pattern),
                )
            )
        stmt = stmt.order_by(AnimalORM.created_at.desc(), AnimalORM.tag)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
