from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from src.domain.models.repro_event import PregnancyStatus


class TrafficLight(str, Enum):
    GREEN = "GREEN"
    YELLOW = "YELLOW"
    RED = "RED"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]


_SEVERITY = {TrafficLight.RED: 0, TrafficLight.YELLOW: 1, TrafficLight.GREEN: 2}


@dataclass(slots=True, frozen=True)
class EmptyAlerts:
    is_empty: bool = False
    is_repeat_empty: bool = False


@dataclass(slots=True, frozen=True)
class ReproKpis:
    last_calving_date: date | None = None
    last_preg_check: date | None = None
    last_preg_status: PregnancyStatus | None = None
    open_days: int | None = None
    iep_days: int | None = None
    preg_rate: float | None = None
    empty_alerts: EmptyAlerts = field(default_factory=EmptyAlerts)

    @property
    def has_history(self) -> bool:
        return not (
            self.open_days is None
            and self.iep_days is None
            and self.last_preg_check is None
            and self.last_calving_date is None
        )


@dataclass(slots=True, frozen=True)
class KpiResult:
    """KPIs plus the raw counts the herd summary needs to aggregate rates."""

    kpis: ReproKpis
    diagnoses_in_scope: int = 0
    pregnant_in_scope: int = 0
    empty_in_scope: int = 0
    is_exposed: bool = False


@dataclass(slots=True, frozen=True)
class Classification:
    traffic_light: TrafficLight
    reasons: tuple[str, ...] = ()
