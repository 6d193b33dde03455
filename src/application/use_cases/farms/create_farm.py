from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID, uuid4

from src.application.errors import ConflictError, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.farm import Farm
from src.domain.value_objects.repro_mode import ReproMode

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateFarmInput:
    name: str
    repro_mode: str = ReproMode.CONTINUO.value
    farm_id: UUID | None = None


async def execute(uow: UnitOfWork, payload: CreateFarmInput) -> Farm:
    name = payload.name.strip() if payload.name else ""
    if not name:
        raise ValidationError("Farm name is required")
    mode = ReproMode.normalize(payload.repro_mode)
    if mode is None:
        raise ValidationError(
            f"Invalid repro mode. Must be one of: {', '.join(m.value for m in ReproMode)}"
        )
    farm_id = payload.farm_id or uuid4()
    if await uow.farms.get(farm_id):
        raise ConflictError(f"Farm {farm_id} already exists")
    farm = await uow.farms.add(Farm(id=farm_id, name=name, repro_mode=mode))
    logger.info("Farm %s created in %s mode", farm.id, mode.value)
    return farm
