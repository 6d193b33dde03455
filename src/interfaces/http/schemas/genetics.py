from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import Field

from src.domain.models.animal import Animal
from src.domain.models.repro_kpis import Classification, ReproKpis
from src.domain.models.selection_decision import SelectionDecision
from src.domain.services.herd_summary import HerdEntry, HerdSummary
from src.interfaces.http.schemas.common import AnimalBrief, CamelModel


def animal_brief(animal: Animal) -> AnimalBrief:
    return AnimalBrief(
        id=str(animal.id),
        tag=animal.tag,
        brinco=animal.tag,
        registry=animal.registry,
        name=animal.name,
        breed=animal.breed,
        raca=animal.breed,
        sex=animal.sex,
        lot_id=str(animal.lot_id) if animal.lot_id else None,
    )


class EmptyAlertsResponse(CamelModel):
    is_empty: bool
    is_repeat_empty: bool


class KpisResponse(CamelModel):
    iep_days: int | None
    open_days: int | None
    preg_rate: float | None
    empty_alerts: EmptyAlertsResponse
    last_calving_date: date | None
    last_preg_check: date | None
    last_preg_status: str | None

    @classmethod
    def from_domain(cls, kpis: ReproKpis) -> KpisResponse:
        return cls(
            iep_days=kpis.iep_days,
            open_days=kpis.open_days,
            preg_rate=kpis.preg_rate,
            empty_alerts=EmptyAlertsResponse(
                is_empty=kpis.empty_alerts.is_empty,
                is_repeat_empty=kpis.empty_alerts.is_repeat_empty,
            ),
            last_calving_date=kpis.last_calving_date,
            last_preg_check=kpis.last_preg_check,
            last_preg_status=kpis.last_preg_status.value if kpis.last_preg_status else None,
        )


class DecisionResponse(CamelModel):
    id: str
    farm_id: str
    animal_id: str
    decision: str
    reason: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, decision: SelectionDecision) -> DecisionResponse:
        return cls(
            id=str(decision.id),
            farm_id=str(decision.farm_id),
            animal_id=str(decision.animal_id),
            decision=decision.decision.value,
            reason=decision.reason,
            created_at=decision.created_at,
            updated_at=decision.updated_at,
        )


class DecisionEnvelope(CamelModel):
    decision: DecisionResponse | None


class DecisionSet(CamelModel):
    animal_id: UUID
    decision: str
    reason: str | None = None


class ScoredAnimalResponse(CamelModel):
    animal: AnimalBrief
    kpis: KpisResponse
    traffic_light: str
    reasons: list[str]
    decision: DecisionResponse | None = None

    @classmethod
    def build(
        cls,
        animal: Animal,
        kpis: ReproKpis,
        classification: Classification,
        decision: SelectionDecision | None,
    ) -> ScoredAnimalResponse:
        return cls(
            animal=animal_brief(animal),
            kpis=KpisResponse.from_domain(kpis),
            traffic_light=classification.traffic_light.value,
            reasons=list(classification.reasons),
            decision=DecisionResponse.from_domain(decision) if decision else None,
        )

    @classmethod
    def from_entry(cls, entry: HerdEntry) -> ScoredAnimalResponse:
        return cls.build(entry.animal, entry.result.kpis, entry.classification, entry.decision)


class SelectionListResponse(CamelModel):
    items: list[ScoredAnimalResponse]
    total: int
    limit: int
    offset: int


class SummaryTotalsResponse(CamelModel):
    females: int
    with_kpis: int
    diag_count: int | None = None
    exposures: int | None = None
    pregnant: int | None = None
    empty: int | None = None


class SummaryBody(CamelModel):
    preg_rate: float | None
    open_days_avg: float | None
    open_days_count: int
    # share of open-days animals above the critical band, as a 0..1 fraction
    open_days_over_critical_pct: float | None = Field(alias="openDaysOver180Pct")
    iep_avg: float | None
    iep_count: int
    totals: SummaryTotalsResponse

    @classmethod
    def from_domain(cls, summary: HerdSummary) -> SummaryBody:
        totals = summary.totals
        return cls(
            preg_rate=summary.preg_rate,
            open_days_avg=summary.open_days_avg,
            open_days_count=summary.open_days_count,
            open_days_over_critical_pct=summary.open_days_over_critical_pct,
            iep_avg=summary.iep_avg,
            iep_count=summary.iep_count,
            totals=SummaryTotalsResponse(
                females=totals.females,
                with_kpis=totals.with_kpis,
                diag_count=totals.diag_count,
                exposures=totals.exposures,
                pregnant=totals.pregnant,
                empty=totals.empty,
            ),
        )


class RecentDecisionResponse(CamelModel):
    animal: AnimalBrief | None
    decision: DecisionResponse


class SummaryResponse(CamelModel):
    summary: SummaryBody
    top_alerts: list[ScoredAnimalResponse]
    decisions: list[RecentDecisionResponse]


class DecisionListResponse(CamelModel):
    decisions: list[DecisionResponse]
