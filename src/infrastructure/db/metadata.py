"""Metadata with every mapped table registered, shared by alembic and the test schema."""

from __future__ import annotations

from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import (  # noqa: F401
    animal,
    breeding_season,
    farm,
    farm_repro_config,
    repro_event,
    selection_decision,
)

metadata = Base.metadata
