from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import Date, DateTime, ForeignKey, String, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class BreedingSeasonORM(Base):
    __tablename__ = "breeding_seasons"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    farm_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("farms.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    start_at: Mapped[date] = mapped_column(Date, nullable=False)
    end_at: Mapped[date] = mapped_column(Date, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )


class SeasonExposureORM(Base):
    __tablename__ = "season_exposures"
    __table_args__ = (
        UniqueConstraint("season_id", "animal_id", name="ux_season_exposures_season_animal"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    season_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("breeding_seasons.id"), nullable=False
    )
    animal_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("animals.id"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
