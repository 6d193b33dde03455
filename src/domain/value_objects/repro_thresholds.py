from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.config.settings import Settings


@dataclass(slots=True, frozen=True)
class ReproThresholds:
    """Day limits used to flag females and to scope the pregnancy rate.

    A value strictly above ``*_warning`` yields YELLOW, strictly above
    ``*_critical`` yields RED. Above ``*_severe`` an extra RED reason is added.
    """

    open_days_warning: int = 120
    open_days_critical: int = 180
    iep_warning: int = 430
    iep_critical: int = 480
    open_days_severe: int = 240
    iep_severe: int = 540
    diagnosis_window_days: int = 120

    @classmethod
    def from_settings(cls, settings: Settings) -> ReproThresholds:
        return cls(
            open_days_warning=settings.repro_open_days_warning,
            open_days_critical=settings.repro_open_days_critical,
            iep_warning=settings.repro_iep_warning,
            iep_critical=settings.repro_iep_critical,
            open_days_severe=settings.repro_open_days_severe,
            iep_severe=settings.repro_iep_severe,
            diagnosis_window_days=settings.repro_diagnosis_window_days,
        )

    def problems(self) -> list[str]:
        issues: list[str] = []
        if self.open_days_warning >= self.open_days_critical:
            issues.append("open_days_warning must be lower than open_days_critical")
        if self.iep_warning >= self.iep_critical:
            issues.append("iep_warning must be lower than iep_critical")
        if self.open_days_critical >= self.open_days_severe:
            issues.append("open_days_critical must be lower than open_days_severe")
        if self.iep_critical >= self.iep_severe:
            issues.append("iep_critical must be lower than iep_severe")
        if self.diagnosis_window_days <= 0:
            issues.append("diagnosis_window_days must be positive")
        return issues
