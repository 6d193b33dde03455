from __future__ import annotations

from datetime import date, datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from src.domain.models.repro_event import ReproEvent, payload_to_dict


class ReproEventCreate(BaseModel):
    animal_id: UUID
    type: str  # COBERTURA, IATF, DIAGNOSTICO_PRENHEZ, PARTO, DESMAME
    event_date: str  # ISO date; validated by the use case
    season_id: UUID | None = None
    payload: dict[str, Any] | None = None
    notes: str | None = None


class ReproEventResponse(BaseModel):
    id: UUID
    farm_id: UUID
    animal_id: UUID
    season_id: UUID | None
    type: str
    event_date: date
    payload: dict[str, Any] | None
    notes: str | None
    created_at: datetime

    @classmethod
    def from_domain(cls, event: ReproEvent) -> ReproEventResponse:
        return cls(
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


class ReproEventListResponse(BaseModel):
    events: list[ReproEventResponse]
