from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends

from src.application.use_cases.farms import (
    get_repro_settings,
    set_repro_mode,
    update_repro_settings,
)
from src.domain.value_objects.repro_thresholds import ReproThresholds
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.deps import get_default_thresholds, get_farm_id, get_uow
from src.interfaces.http.schemas.farms import (
    FarmResponse,
    ReproModeUpdate,
    ReproSettingsResponse,
    ReproSettingsUpdate,
)

router = APIRouter(prefix="/farm", tags=["farm"])


@router.patch("/repro-mode", response_model=FarmResponse)
async def update_repro_mode(
    payload: ReproModeUpdate,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
):
    farm = await set_repro_mode.execute(uow, farm_id, payload.repro_mode)
    await uow.commit()
    return FarmResponse(
        id=farm.id,
        name=farm.name,
        repro_mode=farm.repro_mode.value,
        updated_at=farm.updated_at,
    )


@router.get("/repro-settings", response_model=ReproSettingsResponse)
async def read_repro_settings(
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
    defaults: ReproThresholds = Depends(get_default_thresholds),
):
    thresholds = await get_repro_settings.execute(uow, farm_id, defaults)
    return ReproSettingsResponse.model_validate(thresholds)


@router.put("/repro-settings", response_model=ReproSettingsResponse)
async def write_repro_settings(
    payload: ReproSettingsUpdate,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
    defaults: ReproThresholds = Depends(get_default_thresholds),
):
    thresholds = await update_repro_settings.execute(
        uow,
        farm_id,
        update_repro_settings.UpdateReproSettingsInput(**payload.model_dump()),
        defaults,
    )
    await uow.commit()
    return ReproSettingsResponse.model_validate(thresholds)
