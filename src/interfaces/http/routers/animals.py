from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from src.application.use_cases.genetics import get_animal_kpis
from src.domain.value_objects.repro_thresholds import ReproThresholds
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.deps import get_default_thresholds, get_farm_id, get_uow
from src.interfaces.http.schemas.genetics import ScoredAnimalResponse

router = APIRouter(prefix="/animals", tags=["animals"])


@router.get("/{animal_id}/repro-kpis", response_model=ScoredAnimalResponse)
async def get_repro_kpis(
    animal_id: UUID,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
    defaults: ReproThresholds = Depends(get_default_thresholds),
    season_id: UUID | None = Query(None),
):
    """Reproductive KPIs and traffic light for one female."""
    result = await get_animal_kpis.execute(
        uow, farm_id, animal_id, defaults=defaults, season_id=season_id
    )
    return ScoredAnimalResponse.build(
        result.animal, result.kpis, result.classification, result.decision
    )
