from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.application.interfaces.unit_of_work import UnitOfWork

_REPOSITORIES = (
    "farms",
    "farm_repro_config",
    "animals",
    "repro_events",
    "seasons",
    "exposures",
    "selection_decisions",
)


def create_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, echo=False, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self._reset_repositories()

    def _reset_repositories(self) -> None:
        for name in _REPOSITORIES:
            setattr(self, name, None)

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        from src.infrastructure.repos.animals_sqlalchemy import AnimalsSQLAlchemyRepository
        from src.infrastructure.repos.breeding_seasons_sqlalchemy import (
            BreedingSeasonsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.farm_repro_config_sqlalchemy import (
            FarmReproConfigSQLAlchemyRepository,
        )
        from src.infrastructure.repos.farms_sqlalchemy import FarmsSQLAlchemyRepository
        from src.infrastructure.repos.repro_events_sqlalchemy import (
            ReproEventsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.season_exposures_sqlalchemy import (
            SeasonExposuresSQLAlchemyRepository,
        )
        from src.infrastructure.repos.selection_decisions_sqlalchemy import (
            SelectionDecisionsSQLAlchemyRepository,
        )

        self.farms = FarmsSQLAlchemyRepository(self.session)
        self.farm_repro_config = FarmReproConfigSQLAlchemyRepository(self.session)
        self.animals = AnimalsSQLAlchemyRepository(self.session)
        self.repro_events = ReproEventsSQLAlchemyRepository(self.session)
        self.seasons = BreedingSeasonsSQLAlchemyRepository(self.session)
        self.exposures = SeasonExposuresSQLAlchemyRepository(self.session)
        self.selection_decisions = SelectionDecisionsSQLAlchemyRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self._reset_repositories()

    async def commit(self) -> None:
        if not self.session:
            return
        await self.session.commit()

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()
