from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Integer, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class FarmReproConfigORM(Base):
    __tablename__ = "farm_repro_configs"

    farm_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("farms.id"), primary_key=True
    )
    open_days_warning: Mapped[int | None] = mapped_column(Integer, nullable=True)
    open_days_critical: Mapped[int | None] = mapped_column(Integer, nullable=True)
    iep_warning: Mapped[int | None] = mapped_column(Integer, nullable=True)
    iep_critical: Mapped[int | None] = mapped_column(Integer, nullable=True)
    open_days_severe: Mapped[int | None] = mapped_column(Integer, nullable=True)
    iep_severe: Mapped[int | None] = mapped_column(Integer, nullable=True)
    diagnosis_window_days: Mapped[int | None] = mapped_column(Integer, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
