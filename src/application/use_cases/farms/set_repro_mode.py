from __future__ import annotations

import logging
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.lookups import require_farm
from src.domain.models.farm import Farm
from src.domain.value_objects.repro_mode import ReproMode

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, farm_id: UUID, repro_mode: str) -> Farm:
    mode = ReproMode.normalize(repro_mode)
    if mode is None:
        raise ValidationError(
            f"Invalid repro mode. Must be one of: {', '.join(m.value for m in ReproMode)}"
        )
    farm = await require_farm(uow, farm_id)
    if farm.repro_mode is mode:
        return farm
    farm.change_repro_mode(mode)
    updated = await uow.farms.update(farm)
    logger.info("Farm %s switched to repro mode %s", farm_id, mode.value)
    return updated
