from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import InfrastructureError
from src.domain.models.selection_decision import SelectionChoice, SelectionDecision
from src.infrastructure.db.orm.selection_decision import SelectionDecisionORM


class SelectionDecisionsSQLAlchemyRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: SelectionDecisionORM) -> SelectionDecision:
        return SelectionDecision(
            id=orm.id,
            farm_id=orm.farm_id,
            animal_id=orm.animal_id,
            decision=SelectionChoice(orm.decision),
            reason=orm.reason,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    def _insert(self):
        dialect = self.session.get_bind().dialect.name
        if dialect == "postgresql":
            return postgresql.insert(SelectionDecisionORM)
        if dialect == "sqlite":
            return sqlite.insert(SelectionDecisionORM)
        raise InfrastructureError(f"Decision upsert not supported on {dialect}")

    async def get(self, farm_id: UUID, animal_id: UUID) -> SelectionDecision | None:
        stmt = (
            select(SelectionDecisionORM)
            .where(SelectionDecisionORM.farm_id == farm_id)
            .where(SelectionDecisionORM.animal_id == animal_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def upsert(self, decision: SelectionDecision) -> SelectionDecision:
        # Single statement keyed on (farm_id, animal_id) so concurrent writers
        # for the same animal cannot create two rows.
        stmt = self._insert().values(
            id=decision.id,
            farm_id=decision.farm_id,
            animal_id=decision.animal_id,
            decision=decision.decision.value,
            reason=decision.reason,
            created_at=decision.created_at,
            updated_at=decision.updated_at,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["farm_id", "animal_id"],
            set_={
                "decision": stmt.excluded.decision,
                "reason": stmt.excluded.reason,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self.session.execute(stmt)
        saved = await self.get(decision.farm_id, decision.animal_id)
        if saved is None:
            raise ValueError(f"Decision for animal {decision.animal_id} was not stored")
        return saved

    async def delete(self, farm_id: UUID, animal_id: UUID) -> bool:
        stmt = (
            delete(SelectionDecisionORM)
            .where(SelectionDecisionORM.farm_id == farm_id)
            .where(SelectionDecisionORM.animal_id == animal_id)
        )
        result = await self.session.execute(stmt)
        return bool(result.rowcount)

    async def list(
        self,
        farm_id: UUID,
        *,
        animal_ids: list[UUID] | None = None,
        limit: int | None = None,
    ) -> list[SelectionDecision]:
        if animal_ids is not None and not animal_ids:
            return []
        stmt = select(SelectionDecisionORM).where(SelectionDecisionORM.farm_id == farm_id)
        if animal_ids is not None:
            stmt = stmt.where(SelectionDecisionORM.animal_id.in_(animal_ids))
        stmt = stmt.order_by(SelectionDecisionORM.updated_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        stmt = stmt.execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
