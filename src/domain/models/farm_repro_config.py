from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from datetime import datetime, timezone
from uuid import UUID

from src.domain.value_objects.repro_thresholds import ReproThresholds


@dataclass(slots=True)
class FarmReproConfig:
    """Per-farm overrides; ``None`` falls back to the application default."""

    farm_id: UUID
    open_days_warning: int | None = None
    open_days_critical: int | None = None
    iep_warning: int | None = None
    iep_critical: int | None = None
    open_days_severe: int | None = None
    iep_severe: int | None = None
    diagnosis_window_days: int | None = None
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def resolve(self, defaults: ReproThresholds) -> ReproThresholds:
        overrides = {
            f.name: getattr(self, f.name)
            for f in fields(ReproThresholds)
            if getattr(self, f.name) is not None
        }
        return replace(defaults, **overrides)
