from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.lookups import optional_season, require_farm, resolve_thresholds
from src.application.use_cases.genetics import load_herd
from src.domain.services.herd_summary import HerdEntry, filter_entries
from src.domain.value_objects.repro_thresholds import ReproThresholds
from src.utils.dates import utc_today

MAX_LIMIT = 200


@dataclass(slots=True)
class SelectionViewOutput:
    items: list[HerdEntry]
    total: int


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    *,
    defaults: ReproThresholds,
    season_id: UUID | None = None,
    search: str | None = None,
    only_alerts: bool = False,
    only_females: bool = True,
    limit: int = 50,
    offset: int = 0,
    today: date | None = None,
) -> SelectionViewOutput:
    if limit < 1 or limit > MAX_LIMIT:
        raise ValidationError(f"limit must be between 1 and {MAX_LIMIT}")
    if offset < 0:
        raise ValidationError("offset must be >= 0")

    await require_farm(uow, farm_id)
    season = await optional_season(uow, farm_id, season_id)
    thresholds = await resolve_thresholds(uow, farm_id, defaults)
    term = search.strip() if search else None
    entries = await load_herd.execute(
        uow,
        farm_id,
        thresholds=thresholds,
        today=today or utc_today(),
        season=season,
        only_females=only_females,
        search=term,
    )
    selected = filter_entries(entries, search=term, only_alerts=only_alerts)
    return SelectionViewOutput(items=selected[offset : offset + limit], total=len(selected))
