from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.application.use_cases.seasons import (
    add_exposures,
    create_season,
    delete_season,
    list_exposures,
    list_seasons,
    remove_exposure,
    update_season,
)
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.deps import get_farm_id, get_uow
from src.interfaces.http.schemas.seasons import (
    ExposedAnimal,
    ExposureListResponse,
    ExposureResponse,
    ExposuresAdd,
    ExposuresAddResponse,
    SeasonCreate,
    SeasonListResponse,
    SeasonResponse,
    SeasonUpdate,
)

router = APIRouter(prefix="/seasons", tags=["seasons"])


def _exposure_response(view: list_exposures.ExposureView) -> ExposureResponse:
    return ExposureResponse(
        id=view.exposure.id,
        animal_id=view.exposure.animal_id,
        created_at=view.exposure.created_at,
        animal=ExposedAnimal.model_validate(view.animal) if view.animal else None,
    )


@router.get("/", response_model=SeasonListResponse)
async def get_seasons(
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
):
    seasons = await list_seasons.execute(uow, farm_id)
    return SeasonListResponse(seasons=[SeasonResponse.model_validate(s) for s in seasons])


@router.post("/", response_model=SeasonResponse, status_code=status.HTTP_201_CREATED)
async def post_season(
    payload: SeasonCreate,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
):
    season = await create_season.execute(
        uow,
        farm_id,
        create_season.CreateSeasonInput(
            name=payload.name, start_at=payload.start_at, end_at=payload.end_at
        ),
    )
    await uow.commit()
    return SeasonResponse.model_validate(season)


@router.patch("/{season_id}", response_model=SeasonResponse)
async def patch_season(
    season_id: UUID,
    payload: SeasonUpdate,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
):
    season = await update_season.execute(
        uow,
        farm_id,
        season_id,
        update_season.UpdateSeasonInput(**payload.model_dump(exclude_unset=True)),
    )
    await uow.commit()
    return SeasonResponse.model_validate(season)


@router.delete("/{season_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_season(
    season_id: UUID,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
):
    await delete_season.execute(uow, farm_id, season_id)
    await uow.commit()
    return None


@router.get("/{season_id}/exposures", response_model=ExposureListResponse)
async def get_exposures(
    season_id: UUID,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
):
    views = await list_exposures.execute(uow, farm_id, season_id)
    return ExposureListResponse(exposures=[_exposure_response(v) for v in views])


@router.post(
    "/{season_id}/exposures",
    response_model=ExposuresAddResponse,
    status_code=status.HTTP_201_CREATED,
)
async def post_exposures(
    season_id: UUID,
    payload: ExposuresAdd,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
):
    result = await add_exposures.execute(uow, farm_id, season_id, payload.animal_ids)
    await uow.commit()
    return ExposuresAddResponse(
        created_count=result.created_count,
        existing_count=result.existing_count,
        exposures=[_exposure_response(v) for v in result.exposures],
    )


@router.delete("/{season_id}/exposures/{animal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_exposure(
    season_id: UUID,
    animal_id: UUID,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
):
    removed = await remove_exposure.execute(uow, farm_id, season_id, animal_id)
    if removed:
        await uow.commit()
    return None
