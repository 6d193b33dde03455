from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.application.use_cases.reproduction import list_repro_events, record_repro_event
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.deps import get_farm_id, get_uow
from src.interfaces.http.schemas.repro_events import (
    ReproEventCreate,
    ReproEventListResponse,
    ReproEventResponse,
)

router = APIRouter(prefix="/repro-events", tags=["reproduction"])


@router.get("/", response_model=ReproEventListResponse)
async def get_repro_events(
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
    animal_id: UUID | None = Query(None),
    season_id: UUID | None = Query(None),
):
    events = await list_repro_events.execute(
        uow, farm_id, animal_id=animal_id, season_id=season_id
    )
    return ReproEventListResponse(events=[ReproEventResponse.from_domain(e) for e in events])


@router.post("/", response_model=ReproEventResponse, status_code=status.HTTP_201_CREATED)
async def post_repro_event(
    payload: ReproEventCreate,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
):
    event = await record_repro_event.execute(
        uow,
        farm_id,
        record_repro_event.RecordReproEventInput(
            animal_id=payload.animal_id,
            type=payload.type,
            event_date=payload.event_date,
            season_id=payload.season_id,
            payload=payload.payload,
            notes=payload.notes,
        ),
    )
    await uow.commit()
    return ReproEventResponse.from_domain(event)
