from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SeasonCreate(BaseModel):
    name: str
    start_at: date
    end_at: date


class SeasonUpdate(BaseModel):
    name: str | None = None
    start_at: date | None = None
    end_at: date | None = None


class SeasonResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    farm_id: UUID
    name: str
    start_at: date
    end_at: date
    created_at: datetime
    updated_at: datetime


class SeasonListResponse(BaseModel):
    seasons: list[SeasonResponse]


class ExposuresAdd(BaseModel):
    animal_ids: list[UUID] = Field(min_length=1)


class ExposedAnimal(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    tag: str
    registry: str | None = None
    breed: str | None = None


class ExposureResponse(BaseModel):
    id: UUID
    animal_id: UUID
    created_at: datetime
    animal: ExposedAnimal | None = None


class ExposureListResponse(BaseModel):
    exposures: list[ExposureResponse]


class ExposuresAddResponse(ExposureListResponse):
    created_count: int
    existing_count: int
