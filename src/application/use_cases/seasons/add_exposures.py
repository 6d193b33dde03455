from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.lookups import require_season
from src.application.use_cases.seasons import list_exposures

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AddExposuresOutput:
    created_count: int
    existing_count: int
    exposures: list[list_exposures.ExposureView]


async def execute(
    uow: UnitOfWork, farm_id: UUID, season_id: UUID, animal_ids: list[UUID]
) -> AddExposuresOutput:
    unique_ids = list(dict.fromkeys(animal_ids))
    if not unique_ids:
        raise ValidationError("At least one female must be exposed")
    season = await require_season(uow, farm_id, season_id)

    females = await uow.animals.list(farm_id, sex="FEMEA", ids=unique_ids)
    valid_ids = {animal.id for animal in females}
    invalid = [str(aid) for aid in unique_ids if aid not in valid_ids]
    if invalid:
        raise ValidationError(
            "Only females of the farm can be exposed", details={"animal_ids": invalid}
        )

    created = await uow.exposures.add_many(season.id, unique_ids)
    existing = max(len(unique_ids) - created, 0)
    logger.info("Season %s: %d exposures added, %d already present", season.id, created, existing)
    exposures = await list_exposures.execute(uow, farm_id, season.id)
    return AddExposuresOutput(created_count=created, existing_count=existing, exposures=exposures)
