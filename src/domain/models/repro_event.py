from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Union
from uuid import UUID, uuid4


class ReproEventType(str, Enum):
    COBERTURA = "COBERTURA"
    IATF = "IATF"
    DIAGNOSTICO_PRENHEZ = "DIAGNOSTICO_PRENHEZ"
    PARTO = "PARTO"
    DESMAME = "DESMAME"

    @classmethod
    def normalize(cls, value: object) -> ReproEventType | None:
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


class PregnancyStatus(str, Enum):
    PRENHE = "PRENHE"
    VACIA = "VACIA"

    @classmethod
    def normalize(cls, value: object) -> PregnancyStatus | None:
        if isinstance(value, PregnancyStatus):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


@dataclass(slots=True, frozen=True)
class CoveringPayload:
    bull_id: str | None = None


@dataclass(slots=True, frozen=True)
class TimedAIPayload:
    bull_id: str | None = None
    protocol: str | None = None


@dataclass(slots=True, frozen=True)
class PregnancyDiagnosisPayload:
    status: PregnancyStatus


@dataclass(slots=True, frozen=True)
class CalvingPayload:
    calf_tag: str | None = None


@dataclass(slots=True, frozen=True)
class WeaningPayload:
    weight_kg: float | None = None


ReproPayload = Union[
    CoveringPayload,
    TimedAIPayload,
    PregnancyDiagnosisPayload,
    CalvingPayload,
    WeaningPayload,
]

PAYLOAD_TYPES: dict[ReproEventType, type] = {
    ReproEventType.COBERTURA: CoveringPayload,
    ReproEventType.IATF: TimedAIPayload,
    ReproEventType.DIAGNOSTICO_PRENHEZ: PregnancyDiagnosisPayload,
    ReproEventType.PARTO: CalvingPayload,
    ReproEventType.DESMAME: WeaningPayload,
}


def _clean_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def build_payload(event_type: ReproEventType, raw: dict | None) -> ReproPayload:
    """Build the payload variant matching ``event_type`` from a loose mapping.

    Raises ``ValueError`` when a pregnancy diagnosis has no usable status or a
    weaning weight is not numeric. Unknown keys are ignored.
    """
    raw = raw or {}
    if event_type is ReproEventType.DIAGNOSTICO_PRENHEZ:
        status = PregnancyStatus.normalize(raw.get("status"))
        if status is None:
            raise ValueError("Pregnancy diagnosis requires status PRENHE or VACIA")
        return PregnancyDiagnosisPayload(status=status)
    if event_type is ReproEventType.COBERTURA:
        return CoveringPayload(bull_id=_clean_text(raw.get("bull_id")))
    if event_type is ReproEventType.IATF:
        return TimedAIPayload(
            bull_id=_clean_text(raw.get("bull_id")),
            protocol=_clean_text(raw.get("protocol")),
        )
    if event_type is ReproEventType.PARTO:
        return CalvingPayload(calf_tag=_clean_text(raw.get("calf_tag")))
    weight = raw.get("weight_kg")
    if weight is not None and weight != "":
        try:
            weight = float(weight)
        except (TypeError, ValueError) as exc:
            raise ValueError("Weaning weight must be numeric") from exc
    else:
        weight = None
    return WeaningPayload(weight_kg=weight)


def payload_to_dict(payload: ReproPayload) -> dict[str, Any]:
    data = asdict(payload)
    return {
        key: (value.value if isinstance(value, Enum) else value)
        for key, value in data.items()
        if value is not None
    }


@dataclass(slots=True)
class ReproEvent:
    id: UUID
    farm_id: UUID
    animal_id: UUID
    type: ReproEventType
    event_date: date
    payload: ReproPayload
    season_id: UUID | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        farm_id: UUID,
        animal_id: UUID,
        type: ReproEventType,
        event_date: date,
        payload: ReproPayload,
        season_id: UUID | None = None,
        notes: str | None = None,
    ) -> ReproEvent:
        expected = PAYLOAD_TYPES[type]
        if not isinstance(payload, expected):
            raise ValueError(f"{type.value} events take a {expected.__name__}")
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            animal_id=animal_id,
            type=type,
            event_date=event_date,
            payload=payload,
            season_id=season_id,
            notes=notes,
            created_at=datetime.now(timezone.utc),
        )

    @property
    def pregnancy_status(self) -> PregnancyStatus | None:
        if isinstance(self.payload, PregnancyDiagnosisPayload):
            return self.payload.status
        return None
