from __future__ import annotations

import logging
from collections import defaultdict
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.repro_event import (
    ReproEvent,
    ReproEventType,
    build_payload,
    payload_to_dict,
)
from src.infrastructure.db.orm.repro_event import ReproEventORM

logger = logging.getLogger(__name__)


class ReproEventsSQLAlchemyRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: ReproEventORM) -> ReproEvent:
        event_type = ReproEventType(orm.type)
        return ReproEvent(
            id=orm.id,
            farm_id=orm.farm_id,
            animal_id=orm.animal_id,
            season_id=orm.season_id,
            type=event_type,
            event_date=orm.event_date,
            payload=build_payload(event_type, orm.payload),
            notes=orm.notes,
            created_at=orm.created_at,
        )

    def _load(self, rows: list[ReproEventORM]) -> list[ReproEvent]:
        """Convert stored rows, skipping those whose payload no longer validates."""
        events = []
        for orm in rows:
            try:
                events.append(self._to_domain(orm))
            except ValueError as exc:
                logger.warning(
                    "Skipping repro event %s of animal %s: %s", orm.id, orm.animal_id, exc
                )
        return events

    async def add(self, event: ReproEvent) -> ReproEvent:
        orm = ReproEventORM(
            id=event.id,
            farm_id=event.farm_id,
            animal_id=event.animal_id,
            season_id=event.season_id,
            type=event.type.value,
            event_date=event.event_date,
            payload=payload_to_dict(event.payload) or None,
            notes=event.notes,
            created_at=event.created_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def list(
        self,
        farm_id: UUID,
        *,
        animal_id: UUID | None = None,
        season_id: UUID | None = None,
    ) -> list[ReproEvent]:
        stmt = select(ReproEventORM).where(ReproEventORM.farm_id == farm_id)
        if animal_id:
            stmt = stmt.where(ReproEventORM.animal_id == animal_id)
        if season_id:
            stmt = stmt.where(ReproEventORM.season_id == season_id)
        stmt = stmt.order_by(ReproEventORM.event_date.desc(), ReproEventORM.created_at.desc())
        result = await self.session.execute(stmt)
        return self._load(list(result.scalars().all()))

    async def list_for_animals(
        self, farm_id: UUID, animal_ids: list[UUID]
    ) -> dict[UUID, list[ReproEvent]]:
        grouped: dict[UUID, list[ReproEvent]] = defaultdict(list)
        if not animal_ids:
            return grouped
        stmt = (
            select(ReproEventORM)
            .where(ReproEventORM.farm_id == farm_id)
            .where(ReproEventORM.animal_id.in_(animal_ids))
            .order_by(ReproEventORM.event_date, ReproEventORM.created_at)
        )
        result = await self.session.execute(stmt)
        for event in self._load(list(result.scalars().all())):
            grouped[event.animal_id].append(event)
        return grouped

    async def count_by_season(self, season_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(ReproEventORM)
            .where(ReproEventORM.season_id == season_id)
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one() or 0)
