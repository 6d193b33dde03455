from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class SelectionChoice(str, Enum):
    KEEP = "KEEP"
    WATCH = "WATCH"
    DISCARD = "DISCARD"

    @classmethod
    def normalize(cls, value: object) -> SelectionChoice | None:
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


@dataclass(slots=True)
class SelectionDecision:
    id: UUID
    farm_id: UUID
    animal_id: UUID
    decision: SelectionChoice
    reason: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        farm_id: UUID,
        animal_id: UUID,
        decision: SelectionChoice,
        reason: str | None = None,
    ) -> SelectionDecision:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            animal_id=animal_id,
            decision=decision,
            reason=reason,
            created_at=now,
            updated_at=now,
        )
