from __future__ import annotations

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.farm_repro_config import FarmReproConfigRepository
from src.domain.models.farm_repro_config import FarmReproConfig
from src.infrastructure.db.orm.farm_repro_config import FarmReproConfigORM


class FarmReproConfigSQLAlchemyRepository(FarmReproConfigRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: FarmReproConfigORM) -> FarmReproConfig:
        return FarmReproConfig(
            farm_id=orm.farm_id,
            open_days_warning=orm.open_days_warning,
            open_days_critical=orm.open_days_critical,
            iep_warning=orm.iep_warning,
            iep_critical=orm.iep_critical,
            open_days_severe=orm.open_days_severe,
            iep_severe=orm.iep_severe,
            diagnosis_window_days=orm.diagnosis_window_days,
            updated_at=orm.updated_at,
        )

    async def get(self, farm_id: UUID) -> FarmReproConfig | None:
        orm = await self.session.get(FarmReproConfigORM, farm_id)
        return self._to_domain(orm) if orm else None

    async def upsert(self, config: FarmReproConfig) -> FarmReproConfig:
        orm = await self.session.get(FarmReproConfigORM, config.farm_id)
        if orm is None:
            orm = FarmReproConfigORM(farm_id=config.farm_id)
            self.session.add(orm)
        orm.open_days_warning = config.open_days_warning
        orm.open_days_critical = config.open_days_critical
        orm.iep_warning = config.iep_warning
        orm.iep_critical = config.iep_critical
        orm.open_days_severe = config.open_days_severe
        orm.iep_severe = config.iep_severe
        orm.diagnosis_window_days = config.diagnosis_window_days
        orm.updated_at = config.updated_at
        await self.session.flush()
        return self._to_domain(orm)
