from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.lookups import optional_season, require_farm, resolve_thresholds
from src.application.use_cases.genetics import list_decisions, load_herd
from src.domain.services.herd_summary import HerdEntry, HerdSummary, rank_alerts, summarize_herd
from src.domain.value_objects.repro_thresholds import ReproThresholds
from src.utils.dates import utc_today


@dataclass(slots=True)
class SummaryReportOutput:
    summary: HerdSummary
    top_alerts: list[HerdEntry]
    decisions: list[list_decisions.DecisionView]
    thresholds: ReproThresholds


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    *,
    defaults: ReproThresholds,
    season_id: UUID | None = None,
    top_limit: int = 20,
    decisions_limit: int = 50,
    today: date | None = None,
) -> SummaryReportOutput:
    await require_farm(uow, farm_id)
    season = await optional_season(uow, farm_id, season_id)
    thresholds = await resolve_thresholds(uow, farm_id, defaults)
    entries = await load_herd.execute(
        uow, farm_id, thresholds=thresholds, today=today or utc_today(), season=season
    )
    summary = summarize_herd(entries, thresholds, seasonal=season is not None)
    decisions = await list_decisions.execute(uow, farm_id, limit=decisions_limit)
    return SummaryReportOutput(
        summary=summary,
        top_alerts=rank_alerts(entries, top_limit),
        decisions=decisions,
        thresholds=thresholds,
    )
