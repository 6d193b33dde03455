from __future__ import annotations

import logging
from datetime import datetime, timezone
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.lookups import require_animal
from src.domain.models.selection_decision import SelectionChoice, SelectionDecision

logger = logging.getLogger(__name__)


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    animal_id: UUID,
    decision: str,
    reason: str | None = None,
) -> SelectionDecision:
    """Create or overwrite the curator decision for an animal.

    The decision only overrides the badge shown to the curator; KPIs and the
    automatic classification are untouched.
    """
    choice = SelectionChoice.normalize(decision)
    if choice is None:
        raise ValidationError(
            f"Invalid decision. Must be one of: {', '.join(c.value for c in SelectionChoice)}"
        )
    trimmed = reason.strip() if isinstance(reason, str) else ""
    if choice is SelectionChoice.DISCARD and not trimmed:
        raise ValidationError("A reason is required to discard an animal")

    animal = await require_animal(uow, farm_id, animal_id)
    existing = await uow.selection_decisions.get(farm_id, animal.id)
    if existing:
        existing.decision = choice
        existing.reason = trimmed or None
        existing.updated_at = datetime.now(timezone.utc)
        record = existing
    else:
        record = SelectionDecision.create(
            farm_id=farm_id, animal_id=animal.id, decision=choice, reason=trimmed or None
        )
    saved = await uow.selection_decisions.upsert(record)
    logger.info("Selection decision %s set for animal %s", choice.value, animal.id)
    return saved
