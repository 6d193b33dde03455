from __future__ import annotations

from datetime import date
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import AnimalSex
from src.domain.models.breeding_season import BreedingSeason
from src.domain.services.herd_summary import HerdEntry, build_entries
from src.domain.value_objects.repro_thresholds import ReproThresholds


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    *,
    thresholds: ReproThresholds,
    today: date,
    season: BreedingSeason | None = None,
    only_females: bool = True,
    search: str | None = None,
) -> list[HerdEntry]:
    """Load the in-scope animals with their events and decisions and score them."""
    animals = await uow.animals.list(
        farm_id,
        sex=AnimalSex.FEMEA.value if only_females else None,
        search=search or None,
    )
    if not animals:
        return []
    animal_ids = [animal.id for animal in animals]
    events_by_animal = await uow.repro_events.list_for_animals(farm_id, animal_ids)
    decisions = await uow.selection_decisions.list(farm_id, animal_ids=animal_ids)
    exposed_ids = await uow.exposures.animal_ids(season.id) if season else set()
    return build_entries(
        animals,
        events_by_animal,
        {decision.animal_id: decision for decision in decisions},
        today=today,
        thresholds=thresholds,
        season=season,
        exposed_ids=exposed_ids,
    )
