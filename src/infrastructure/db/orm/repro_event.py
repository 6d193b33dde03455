from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import JSON, Date, DateTime, ForeignKey, Index, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class ReproEventORM(Base):
    __tablename__ = "repro_events"
    __table_args__ = (
        Index("ix_repro_events_farm_animal_date", "farm_id", "animal_id", "event_date"),
        Index("ix_repro_events_season", "season_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    farm_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("farms.id"), nullable=False
    )
    animal_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("animals.id"), nullable=False
    )
    season_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("breeding_seasons.id"), nullable=True
    )
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    event_date: Mapped[date] = mapped_column(Date, nullable=False)
    payload: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
