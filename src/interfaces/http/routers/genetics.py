from __future__ import annotations

from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.application.use_cases.genetics import (
    clear_decision,
    get_decision,
    list_decisions,
    selection_view,
    set_decision,
    summary_report,
)
from src.config.settings import Settings
from src.domain.value_objects.repro_thresholds import ReproThresholds
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.deps import (
    get_app_settings,
    get_default_thresholds,
    get_farm_id,
    get_uow,
)
from src.interfaces.http.schemas.genetics import (
    DecisionEnvelope,
    DecisionListResponse,
    DecisionResponse,
    DecisionSet,
    RecentDecisionResponse,
    ScoredAnimalResponse,
    SelectionListResponse,
    SummaryBody,
    SummaryResponse,
    animal_brief,
)

router = APIRouter(prefix="/genetics", tags=["genetics"])


@router.get("/selection", response_model=SelectionListResponse)
async def get_selection(
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
    defaults: ReproThresholds = Depends(get_default_thresholds),
    season_id: UUID | None = Query(None),
    search: str | None = Query(None),
    status_filter: Literal["all", "alert"] = Query("all", alias="status"),
    only_females: bool = Query(True),
    limit: int = Query(50),
    offset: int = Query(0),
):
    result = await selection_view.execute(
        uow,
        farm_id,
        defaults=defaults,
        season_id=season_id,
        search=search,
        only_alerts=status_filter == "alert",
        only_females=only_females,
        limit=limit,
        offset=offset,
    )
    return SelectionListResponse(
        items=[ScoredAnimalResponse.from_entry(entry) for entry in result.items],
        total=result.total,
        limit=limit,
        offset=offset,
    )


@router.get("/reports/summary", response_model=SummaryResponse)
async def get_summary(
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
    defaults: ReproThresholds = Depends(get_default_thresholds),
    settings: Settings = Depends(get_app_settings),
    season_id: UUID | None = Query(None),
):
    report = await summary_report.execute(
        uow,
        farm_id,
        defaults=defaults,
        season_id=season_id,
        top_limit=settings.summary_top_alerts_limit,
        decisions_limit=settings.summary_recent_decisions_limit,
    )
    return SummaryResponse(
        summary=SummaryBody.from_domain(report.summary),
        top_alerts=[ScoredAnimalResponse.from_entry(entry) for entry in report.top_alerts],
        decisions=[
            RecentDecisionResponse(
                animal=animal_brief(view.animal) if view.animal else None,
                decision=DecisionResponse.from_domain(view.decision),
            )
            for view in report.decisions
        ],
    )


@router.get("/selection/decisions", response_model=DecisionListResponse)
async def get_decisions(
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
    limit: int | None = Query(None, ge=1),
):
    views = await list_decisions.execute(uow, farm_id, limit=limit)
    return DecisionListResponse(
        decisions=[DecisionResponse.from_domain(view.decision) for view in views]
    )


@router.post("/selection/decisions", response_model=DecisionEnvelope)
async def post_decision(
    payload: DecisionSet,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
):
    decision = await set_decision.execute(
        uow, farm_id, payload.animal_id, payload.decision, payload.reason
    )
    await uow.commit()
    return DecisionEnvelope(decision=DecisionResponse.from_domain(decision))


@router.get("/selection/decisions/{animal_id}", response_model=DecisionEnvelope)
async def read_decision(
    animal_id: UUID,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
):
    decision = await get_decision.execute(uow, farm_id, animal_id)
    return DecisionEnvelope(decision=DecisionResponse.from_domain(decision) if decision else None)


@router.delete("/selection/decisions/{animal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_decision(
    animal_id: UUID,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
):
    if await clear_decision.execute(uow, farm_id, animal_id):
        await uow.commit()
    return None
