from __future__ import annotations

from uuid import UUID

from src.application.errors import ConflictError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.lookups import require_season


async def execute(uow: UnitOfWork, farm_id: UUID, season_id: UUID) -> None:
    season = await require_season(uow, farm_id, season_id)
    exposures = await uow.exposures.count(season.id)
    events = await uow.repro_events.count_by_season(season.id)
    if exposures or events:
        raise ConflictError(
            "Season has linked records",
            details={"exposures": exposures, "events": events},
        )
    await uow.seasons.delete(season)
