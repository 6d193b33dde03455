from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import Animal
from src.domain.models.breeding_season import BreedingSeason
from src.domain.models.farm import Farm
from src.domain.value_objects.repro_thresholds import ReproThresholds


async def require_farm(uow: UnitOfWork, farm_id: UUID) -> Farm:
    farm = await uow.farms.get(farm_id)
    if not farm:
        raise NotFound(f"Farm {farm_id} not found")
    return farm


async def require_animal(uow: UnitOfWork, farm_id: UUID, animal_id: UUID) -> Animal:
    animal = await uow.animals.get(farm_id, animal_id)
    if not animal:
        raise NotFound(f"Animal {animal_id} not found")
    return animal


async def require_female(uow: UnitOfWork, farm_id: UUID, animal_id: UUID) -> Animal:
    animal = await require_animal(uow, farm_id, animal_id)
    if not animal.is_female:
        raise ValidationError("Reproduction data is only available for females")
    return animal


async def require_season(uow: UnitOfWork, farm_id: UUID, season_id: UUID) -> BreedingSeason:
    season = await uow.seasons.get(farm_id, season_id)
    if not season:
        raise NotFound(f"Breeding season {season_id} not found")
    return season


async def optional_season(
    uow: UnitOfWork, farm_id: UUID, season_id: UUID | None
) -> BreedingSeason | None:
    if season_id is None:
        return None
    return await require_season(uow, farm_id, season_id)


async def resolve_thresholds(
    uow: UnitOfWork, farm_id: UUID, defaults: ReproThresholds
) -> ReproThresholds:
    config = await uow.farm_repro_config.get(farm_id)
    return config.resolve(defaults) if config else defaults
