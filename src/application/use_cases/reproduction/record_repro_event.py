from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.lookups import require_farm, require_female, require_season
from src.domain.models.repro_event import ReproEvent, ReproEventType, build_payload
from src.utils.dates import coerce_date

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RecordReproEventInput:
    animal_id: UUID
    type: str
    event_date: date | str
    season_id: UUID | None = None
    payload: dict | None = None
    notes: str | None = None


async def execute(uow: UnitOfWork, farm_id: UUID, payload: RecordReproEventInput) -> ReproEvent:
    event_type = ReproEventType.normalize(payload.type)
    if event_type is None:
        raise ValidationError(
            f"Invalid event type. Must be one of: {', '.join(t.value for t in ReproEventType)}"
        )
    event_date = coerce_date(payload.event_date)
    if event_date is None:
        raise ValidationError("Invalid event date")
    try:
        event_payload = build_payload(event_type, payload.payload)
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc

    await require_farm(uow, farm_id)
    animal = await require_female(uow, farm_id, payload.animal_id)
    season_id = None
    if payload.season_id:
        season = await require_season(uow, farm_id, payload.season_id)
        season_id = season.id

    notes = payload.notes.strip() if payload.notes else None
    event = ReproEvent.create(
        farm_id=farm_id,
        animal_id=animal.id,
        type=event_type,
        event_date=event_date,
        payload=event_payload,
        season_id=season_id,
        notes=notes or None,
    )
    created = await uow.repro_events.add(event)
    logger.info("Recorded %s for animal %s on %s", event_type.value, animal.id, event_date)
    return created
