from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from datetime import date
from pathlib import Path
from typing import cast
from uuid import UUID, uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.config.settings import Settings
from src.infrastructure.db.metadata import metadata
from src.infrastructure.db.orm.animal import AnimalORM
from src.infrastructure.db.orm.farm import FarmORM
from src.interfaces.http.main import create_app


@pytest.fixture()
def farm_id() -> UUID:
    return uuid4()


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "farm_header": "X-Farm-ID",
            "log_level": "INFO",
            "environment": "test",
        }
    )


@pytest.fixture()
def app(test_settings: Settings):
    return create_app(settings=test_settings)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(metadata.drop_all)
            await conn.run_sync(metadata.create_all)
        yield client
    await app.state.engine.dispose()


@pytest.fixture()
def farm_headers(farm_id: UUID) -> dict[str, str]:
    return {"X-Farm-ID": str(farm_id)}


async def _seed_farm(app, farm_id: UUID, repro_mode: str) -> None:
    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        async_session = cast(AsyncSession, session)
        async_session.add(FarmORM(id=farm_id, name="Fazenda Boa Vista", repro_mode=repro_mode))
        await async_session.commit()


@pytest.fixture()
async def seeded_farm(app, client, farm_id: UUID) -> UUID:
    await _seed_farm(app, farm_id, "CONTINUO")
    return farm_id


@pytest.fixture()
async def seeded_seasonal_farm(app, client, farm_id: UUID) -> UUID:
    await _seed_farm(app, farm_id, "ESTACAO")
    return farm_id


@pytest.fixture()
def seed_animals(app):
    async def _seed(farm_id: UUID, *rows: tuple[str, str, str | None]) -> dict[str, UUID]:
        """Insert animals given as ``(tag, sex, registry)`` and return ids by tag."""
        ids: dict[str, UUID] = {}
        async with app.state.session_factory() as session:  # type: ignore[attr-defined]
            async_session = cast(AsyncSession, session)
            for tag, sex, registry in rows:
                animal_id = uuid4()
                ids[tag] = animal_id
                async_session.add(
                    AnimalORM(
                        id=animal_id,
                        farm_id=farm_id,
                        tag=tag,
                        sex=sex,
                        registry_number=registry,
                        breed="Gir",
                        birth_date=date(2018, 3, 1),
                    )
                )
            await async_session.commit()
        return ids

    return _seed
