from __future__ import annotations

import logging
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, farm_id: UUID, animal_id: UUID) -> bool:
    """Remove the decision if there is one. Clearing a missing decision is a no-op."""
    removed = await uow.selection_decisions.delete(farm_id, animal_id)
    if removed:
        logger.info("Selection decision cleared for animal %s", animal_id)
    return removed
