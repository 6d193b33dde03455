from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.lookups import require_farm
from src.domain.models.farm_repro_config import FarmReproConfig
from src.domain.value_objects.repro_thresholds import ReproThresholds


@dataclass(slots=True)
class UpdateReproSettingsInput:
    open_days_warning: int | None = None
    open_days_critical: int | None = None
    iep_warning: int | None = None
    iep_critical: int | None = None
    open_days_severe: int | None = None
    iep_severe: int | None = None
    diagnosis_window_days: int | None = None


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    payload: UpdateReproSettingsInput,
    defaults: ReproThresholds,
) -> ReproThresholds:
    """Store farm overrides; a ``None`` field resets it to the default."""
    await require_farm(uow, farm_id)
    config = FarmReproConfig(
        farm_id=farm_id,
        open_days_warning=payload.open_days_warning,
        open_days_critical=payload.open_days_critical,
        iep_warning=payload.iep_warning,
        iep_critical=payload.iep_critical,
        open_days_severe=payload.open_days_severe,
        iep_severe=payload.iep_severe,
        diagnosis_window_days=payload.diagnosis_window_days,
        updated_at=datetime.now(timezone.utc),
    )
    resolved = config.resolve(defaults)
    problems = resolved.problems()
    if problems:
        raise ValidationError("Invalid reproduction thresholds", details={"errors": problems})
    await uow.farm_repro_config.upsert(config)
    return resolved
