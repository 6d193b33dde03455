from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ReproModeUpdate(BaseModel):
    repro_mode: str  # CONTINUO, ESTACAO


class FarmResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    repro_mode: str
    updated_at: datetime


class ReproSettingsUpdate(BaseModel):
    open_days_warning: int | None = Field(default=None, gt=0)
    open_days_critical: int | None = Field(default=None, gt=0)
    iep_warning: int | None = Field(default=None, gt=0)
    iep_critical: int | None = Field(default=None, gt=0)
    open_days_severe: int | None = Field(default=None, gt=0)
    iep_severe: int | None = Field(default=None, gt=0)
    diagnosis_window_days: int | None = Field(default=None, gt=0)


class ReproSettingsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    open_days_warning: int
    open_days_critical: int
    iep_warning: int
    iep_critical: int
    open_days_severe: int
    iep_severe: int
    diagnosis_window_days: int
