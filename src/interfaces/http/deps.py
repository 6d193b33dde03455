from __future__ import annotations

from collections.abc import AsyncIterator
from uuid import UUID

from fastapi import Request

from src.application.errors import PermissionDenied
from src.config.settings import Settings, get_settings
from src.domain.value_objects.repro_thresholds import ReproThresholds
from src.infrastructure.db.session import SQLAlchemyUnitOfWork


async def get_farm_id(request: Request) -> UUID:
    farm_id = getattr(request.state, "farm_id", None)
    if farm_id is None:
        raise PermissionDenied("Farm scope required")
    return farm_id


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_default_thresholds(request: Request) -> ReproThresholds:
    return ReproThresholds.from_settings(get_app_settings(request))
