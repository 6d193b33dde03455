from __future__ import annotations

from typing import Protocol

from src.application.interfaces.repositories.animals import AnimalRepository
from src.application.interfaces.repositories.breeding_seasons import BreedingSeasonsRepository
from src.application.interfaces.repositories.farm_repro_config import FarmReproConfigRepository
from src.application.interfaces.repositories.farms import FarmsRepository
from src.application.interfaces.repositories.repro_events import ReproEventsRepository
from src.application.interfaces.repositories.season_exposures import SeasonExposuresRepository
from src.application.interfaces.repositories.selection_decisions import (
    SelectionDecisionsRepository,
)


class UnitOfWork(Protocol):
    farms: FarmsRepository
    farm_repro_config: FarmReproConfigRepository
    animals: AnimalRepository
    repro_events: ReproEventsRepository
    seasons: BreedingSeasonsRepository
    exposures: SeasonExposuresRepository
    selection_decisions: SelectionDecisionsRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
