from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, timedelta

from src.domain.models.breeding_season import BreedingSeason
from src.domain.models.repro_event import PregnancyStatus, ReproEvent, ReproEventType
from src.domain.models.repro_kpis import EmptyAlerts, KpiResult, ReproKpis
from src.domain.value_objects.repro_thresholds import ReproThresholds
from src.utils.dates import coerce_date, days_between, ensure_aware

logger = logging.getLogger(__name__)


def _in_season(event: ReproEvent, event_date: date, season: BreedingSeason) -> bool:
    if event.season_id is not None:
        return event.season_id == season.id
    return season.contains(event_date)


def _ordered(events: Iterable[ReproEvent]) -> list[tuple[date, ReproEvent]]:
    """Sort usable events oldest first.

    Same-day events are ordered by ``created_at`` and then by their position in
    the input, so the last element always wins a tie.
    """
    keyed = []
    for index, event in enumerate(events):
        event_date = coerce_date(event.event_date)
        if event_date is None:
            logger.warning(
                "Skipping repro event %s of animal %s: unusable date %r",
                event.id,
                event.animal_id,
                event.event_date,
            )
            continue
        keyed.append((event_date, ensure_aware(event.created_at), index, event))
    keyed.sort(key=lambda item: item[:3])
    return [(event_date, event) for event_date, _, _, event in keyed]


def compute_repro_kpis(
    events: Iterable[ReproEvent],
    today: date,
    *,
    season: BreedingSeason | None = None,
    is_exposed: bool = False,
    thresholds: ReproThresholds | None = None,
) -> KpiResult:
    """Derive reproductive KPIs for one female from her event history.

    Calvings are never season-filtered. With a ``season``, diagnoses count
    when tagged with it (or untagged and dated inside it) and, for exposed
    females without a calving, the season start anchors open days. Without a
    season the pregnancy rate only looks at diagnoses within
    ``diagnosis_window_days`` of the latest one.
    """
    thresholds = thresholds or ReproThresholds()

    last_calving: date | None = None
    previous_calving: date | None = None
    diagnoses: list[tuple[date, PregnancyStatus]] = []

    for event_date, event in _ordered(events):
        if event.type is ReproEventType.PARTO:
            previous_calving, last_calving = last_calving, event_date
        elif event.type is ReproEventType.DIAGNOSTICO_PRENHEZ:
            status = event.pregnancy_status
            if status is None:
                continue
            if season is not None and not _in_season(event, event_date, season):
                continue
            diagnoses.append((event_date, status))

    iep_days = None
    if last_calving is not None and previous_calving is not None:
        iep_days = days_between(last_calving, previous_calving)

    anchor = last_calving
    if anchor is None and season is not None and is_exposed:
        anchor = season.start_at

    open_days = None
    if anchor is not None:
        conception = next(
            (d for d, status in diagnoses if d > anchor and status is PregnancyStatus.PRENHE),
            None,
        )
        end = conception if conception is not None else today
        open_days = max(days_between(end, anchor), 0)

    if season is None and diagnoses:
        window_start = diagnoses[-1][0] - timedelta(days=thresholds.diagnosis_window_days)
        rate_scope = [status for d, status in diagnoses if d >= window_start]
    else:
        rate_scope = [status for _, status in diagnoses]
    pregnant = sum(1 for status in rate_scope if status is PregnancyStatus.PRENHE)
    empty = len(rate_scope) - pregnant
    preg_rate = pregnant / len(rate_scope) if rate_scope else None

    last_status = diagnoses[-1][1] if diagnoses else None
    is_empty = last_status is PregnancyStatus.VACIA
    is_repeat_empty = (
        is_empty and len(diagnoses) >= 2 and diagnoses[-2][1] is PregnancyStatus.VACIA
    )

    kpis = ReproKpis(
        last_calving_date=last_calving,
        last_preg_check=diagnoses[-1][0] if diagnoses else None,
        last_preg_status=last_status,
        open_days=open_days,
        iep_days=iep_days,
        preg_rate=preg_rate,
        empty_alerts=EmptyAlerts(is_empty=is_empty, is_repeat_empty=is_repeat_empty),
    )
    return KpiResult(
        kpis=kpis,
        diagnoses_in_scope=len(rate_scope),
        pregnant_in_scope=pregnant,
        empty_in_scope=empty,
        is_exposed=is_exposed,
    )
