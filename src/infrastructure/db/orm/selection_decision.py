from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Index, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class SelectionDecisionORM(Base):
    __tablename__ = "selection_decisions"
    __table_args__ = (
        UniqueConstraint("farm_id", "animal_id", name="ux_selection_decisions_farm_animal"),
        Index("ix_selection_decisions_farm_updated", "farm_id", "updated_at"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    farm_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("farms.id"), nullable=False
    )
    animal_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("animals.id"), nullable=False
    )
    decision: Mapped[str] = mapped_column(String(16), nullable=False)
    reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
