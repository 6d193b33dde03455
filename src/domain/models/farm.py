from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID

from src.domain.value_objects.repro_mode import ReproMode


@dataclass(slots=True)
class Farm:
    id: UUID
    name: str
    repro_mode: ReproMode = ReproMode.CONTINUO
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_seasonal(self) -> bool:
        return self.repro_mode.is_seasonal()

    def change_repro_mode(self, mode: ReproMode) -> None:
        self.repro_mode = mode
        self.updated_at = datetime.now(timezone.utc)
