from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.domain.models.animal import Animal
from src.domain.models.breeding_season import BreedingSeason
from src.domain.models.repro_event import ReproEvent
from src.domain.models.repro_kpis import Classification, KpiResult, TrafficLight
from src.domain.models.selection_decision import SelectionDecision
from src.domain.services.repro_kpis import compute_repro_kpis
from src.domain.services.traffic_light import classify
from src.domain.value_objects.repro_thresholds import ReproThresholds


@dataclass(slots=True)
class HerdEntry:
    animal: Animal
    result: KpiResult
    classification: Classification
    decision: SelectionDecision | None = None

    @property
    def is_alert(self) -> bool:
        return self.classification.traffic_light is not TrafficLight.GREEN


@dataclass(slots=True)
class SummaryTotals:
    females: int = 0
    with_kpis: int = 0
    diag_count: int | None = None
    exposures: int | None = None
    pregnant: int | None = None
    empty: int | None = None


@dataclass(slots=True)
class HerdSummary:
    preg_rate: float | None
    open_days_avg: float | None
    open_days_count: int
    open_days_over_critical_pct: float | None
    iep_avg: float | None
    iep_count: int
    totals: SummaryTotals


def build_entries(
    animals: Iterable[Animal],
    events_by_animal: Mapping[UUID, Sequence[ReproEvent]],
    decisions_by_animal: Mapping[UUID, SelectionDecision],
    *,
    today: date,
    thresholds: ReproThresholds,
    season: BreedingSeason | None = None,
    exposed_ids: set[UUID] | frozenset[UUID] = frozenset(),
) -> list[HerdEntry]:
    entries = []
    for animal in animals:
        result = compute_repro_kpis(
            events_by_animal.get(animal.id, ()),
            today,
            season=season,
            is_exposed=animal.id in exposed_ids,
            thresholds=thresholds,
        )
        entries.append(
            HerdEntry(
                animal=animal,
                result=result,
                classification=classify(result.kpis, thresholds),
                decision=decisions_by_animal.get(animal.id),
            )
        )
    return entries


def _average(values: list[int]) -> float | None:
    return sum(values) / len(values) if values else None


def summarize_herd(
    entries: Sequence[HerdEntry],
    thresholds: ReproThresholds,
    *,
    seasonal: bool = False,
) -> HerdSummary:
    """Roll up per-animal KPIs into farm figures.

    Averages only use animals with a defined value and report the count used.
    In seasonal mode the pregnancy rate is exposed females with a PRENHE in
    the season over exposed females; otherwise it is pooled over diagnoses.
    """
    open_days = [e.result.kpis.open_days for e in entries if e.result.kpis.open_days is not None]
    iep_days = [e.result.kpis.iep_days for e in entries if e.result.kpis.iep_days is not None]
    over_critical = sum(1 for value in open_days if value > thresholds.open_days_critical)

    totals = SummaryTotals(
        females=len(entries),
        with_kpis=sum(1 for e in entries if e.result.kpis.has_history),
    )
    if seasonal:
        exposed = [e for e in entries if e.result.is_exposed]
        pregnant = sum(1 for e in exposed if e.result.pregnant_in_scope > 0)
        totals.exposures = len(exposed)
        totals.pregnant = pregnant
        totals.empty = sum(1 for e in exposed if e.result.empty_in_scope > 0)
        preg_rate = pregnant / len(exposed) if exposed else None
    else:
        diagnoses = sum(e.result.diagnoses_in_scope for e in entries)
        pregnant = sum(e.result.pregnant_in_scope for e in entries)
        totals.diag_count = diagnoses
        preg_rate = pregnant / diagnoses if diagnoses else None

    return HerdSummary(
        preg_rate=preg_rate,
        open_days_avg=_average(open_days),
        open_days_count=len(open_days),
        open_days_over_critical_pct=over_critical / len(open_days) if open_days else None,
        iep_avg=_average(iep_days),
        iep_count=len(iep_days),
        totals=totals,
    )


def rank_alerts(entries: Iterable[HerdEntry], limit: int | None = None) -> list[HerdEntry]:
    """Order by severity (RED, YELLOW, GREEN), longest open days first within a band."""

    def key(entry: HerdEntry) -> tuple[int, int, int]:
        open_days = entry.result.kpis.open_days
        return (
            entry.classification.traffic_light.severity,
            0 if open_days is not None else 1,
            -(open_days or 0),
        )

    ranked = sorted(entries, key=key)
    return ranked[:limit] if limit is not None else ranked


def filter_entries(
    entries: Iterable[HerdEntry],
    *,
    search: str | None = None,
    only_alerts: bool = False,
) -> list[HerdEntry]:
    selected = []
    for entry in entries:
        if search and not entry.animal.matches(search):
            continue
        if only_alerts and not entry.is_alert:
            continue
        selected.append(entry)
    return selected
