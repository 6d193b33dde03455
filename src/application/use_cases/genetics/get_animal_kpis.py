from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.lookups import optional_season, require_female, resolve_thresholds
from src.domain.models.animal import Animal
from src.domain.models.repro_kpis import Classification, ReproKpis
from src.domain.models.selection_decision import SelectionDecision
from src.domain.services.repro_kpis import compute_repro_kpis
from src.domain.services.traffic_light import classify
from src.domain.value_objects.repro_thresholds import ReproThresholds
from src.utils.dates import utc_today


@dataclass(slots=True)
class AnimalKpisOutput:
    animal: Animal
    kpis: ReproKpis
    classification: Classification
    decision: SelectionDecision | None


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    animal_id: UUID,
    *,
    defaults: ReproThresholds,
    season_id: UUID | None = None,
    today: date | None = None,
) -> AnimalKpisOutput:
    animal = await require_female(uow, farm_id, animal_id)
    season = await optional_season(uow, farm_id, season_id)
    thresholds = await resolve_thresholds(uow, farm_id, defaults)
    events = await uow.repro_events.list(farm_id, animal_id=animal.id)
    is_exposed = False
    if season:
        is_exposed = animal.id in await uow.exposures.animal_ids(season.id)
    result = compute_repro_kpis(
        events,
        today or utc_today(),
        season=season,
        is_exposed=is_exposed,
        thresholds=thresholds,
    )
    decision = await uow.selection_decisions.get(farm_id, animal.id)
    return AnimalKpisOutput(
        animal=animal,
        kpis=result.kpis,
        classification=classify(result.kpis, thresholds),
        decision=decision,
    )
