from __future__ import annotations

from datetime import date
from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.errors import NotFound, ValidationError
from src.application.use_cases.genetics import (
    clear_decision,
    get_animal_kpis,
    get_decision,
    selection_view,
    set_decision,
    summary_report,
)
from src.domain.models.animal import Animal
from src.domain.models.farm import Farm
from src.domain.models.repro_event import (
    PregnancyDiagnosisPayload,
    PregnancyStatus,
    ReproEvent,
    ReproEventType,
)
from src.domain.models.repro_kpis import TrafficLight
from src.domain.models.selection_decision import SelectionChoice
from src.domain.value_objects.repro_thresholds import ReproThresholds


class StubAnimals:
    def __init__(self, animals: list[Animal]) -> None:
        self.animals = {animal.id: animal for animal in animals}

    async def get(self, farm_id, animal_id):
        animal = self.animals.get(animal_id)
        return animal if animal and animal.farm_id == farm_id else None

    async def list(self, farm_id, *, sex=None, search=None, ids=None):
        return [
            a
            for a in self.animals.values()
            if a.farm_id == farm_id and (sex is None or a.sex == sex)
        ]


class StubDecisions:
    def __init__(self) -> None:
        self.rows = {}
        self.upserts = 0

    async def get(self, farm_id, animal_id):
        return self.rows.get((farm_id, animal_id))

    async def upsert(self, decision):
        self.upserts += 1
        self.rows[(decision.farm_id, decision.animal_id)] = decision
        return decision

    async def delete(self, farm_id, animal_id):
        return self.rows.pop((farm_id, animal_id), None) is not None

    async def list(self, farm_id, *, animal_ids=None, limit=None):
        rows = [d for (f, _), d in self.rows.items() if f == farm_id]
        if animal_ids is not None:
            rows = [d for d in rows if d.animal_id in animal_ids]
        rows.sort(key=lambda d: d.updated_at, reverse=True)
        return rows[:limit] if limit is not None else rows


class StubEvents:
    def __init__(self, events: list[ReproEvent] | None = None) -> None:
        self.events = events or []

    async def list(self, farm_id, *, animal_id=None, season_id=None):
        return [e for e in self.events if animal_id is None or e.animal_id == animal_id]

    async def list_for_animals(self, farm_id, animal_ids):
        grouped: dict = {}
        for event in self.events:
            if event.animal_id in animal_ids:
                grouped.setdefault(event.animal_id, []).append(event)
        return grouped


def make_uow(farm: Farm, animals: list[Animal], events: list[ReproEvent] | None = None):
    async def get_farm(farm_id):
        return farm if farm_id == farm.id else None

    async def get_config(farm_id):
        return None

    async def no_exposures(season_id):
        return set()

    async def commit():
        return None

    async def rollback():
        return None

    return SimpleNamespace(
        farms=SimpleNamespace(get=get_farm),
        farm_repro_config=SimpleNamespace(get=get_config),
        animals=StubAnimals(animals),
        repro_events=StubEvents(events),
        seasons=SimpleNamespace(),
        exposures=SimpleNamespace(animal_ids=no_exposures),
        selection_decisions=StubDecisions(),
        commit=commit,
        rollback=rollback,
    )


@pytest.fixture()
def herd():
    farm = Farm(id=uuid4(), name="Fazenda Santa Luzia")
    cow = Animal(id=uuid4(), farm_id=farm.id, tag="G-101", registry="PO-55")
    bull = Animal(id=uuid4(), farm_id=farm.id, tag="T-9", sex="MACHO")
    return farm, cow, bull


def empty_check(animal: Animal, day: date) -> ReproEvent:
    return ReproEvent.create(
        farm_id=animal.farm_id,
        animal_id=animal.id,
        type=ReproEventType.DIAGNOSTICO_PRENHEZ,
        event_date=day,
        payload=PregnancyDiagnosisPayload(status=PregnancyStatus.VACIA),
    )


@pytest.mark.asyncio
async def test_discard_requires_reason(herd):
    farm, cow, _ = herd
    uow = make_uow(farm, [cow])

    with pytest.raises(ValidationError):
        await set_decision.execute(uow, farm.id, cow.id, "DISCARD", "   ")
    assert uow.selection_decisions.upserts == 0

    saved = await set_decision.execute(
        uow, farm.id, cow.id, "discard", "baixa taxa de prenhez"
    )
    fetched = await get_decision.execute(uow, farm.id, cow.id)
    assert saved.decision is SelectionChoice.DISCARD
    assert fetched is not None
    assert fetched.reason == "baixa taxa de prenhez"


@pytest.mark.asyncio
async def test_invalid_decision_rejected(herd):
    farm, cow, _ = herd
    uow = make_uow(farm, [cow])

    with pytest.raises(ValidationError):
        await set_decision.execute(uow, farm.id, cow.id, "SELL")


@pytest.mark.asyncio
async def test_set_decision_unknown_animal(herd):
    farm, cow, _ = herd
    uow = make_uow(farm, [cow])

    with pytest.raises(NotFound):
        await set_decision.execute(uow, farm.id, uuid4(), "KEEP")


@pytest.mark.asyncio
async def test_set_decision_is_idempotent(herd):
    farm, cow, _ = herd
    uow = make_uow(farm, [cow])

    first = await set_decision.execute(uow, farm.id, cow.id, "WATCH")
    second = await set_decision.execute(uow, farm.id, cow.id, "WATCH")

    assert first.id == second.id
    assert len(uow.selection_decisions.rows) == 1
    assert second.updated_at >= first.created_at


@pytest.mark.asyncio
async def test_clear_missing_decision_is_noop(herd):
    farm, cow, _ = herd
    uow = make_uow(farm, [cow])

    assert await clear_decision.execute(uow, farm.id, cow.id) is False

    await set_decision.execute(uow, farm.id, cow.id, "KEEP")
    assert await clear_decision.execute(uow, farm.id, cow.id) is True
    assert await get_decision.execute(uow, farm.id, cow.id) is None


@pytest.mark.asyncio
async def test_animal_kpis_for_repeat_empty_female(herd):
    farm, cow, _ = herd
    events = [empty_check(cow, date(2024, 2, 1)), empty_check(cow, date(2024, 3, 1))]
    uow = make_uow(farm, [cow], events)

    result = await get_animal_kpis.execute(
        uow, farm.id, cow.id, defaults=ReproThresholds(), today=date(2024, 3, 10)
    )

    assert result.kpis.empty_alerts.is_repeat_empty is True
    assert result.classification.traffic_light is TrafficLight.RED
    assert result.decision is None


@pytest.mark.asyncio
async def test_animal_kpis_rejects_males(herd):
    farm, cow, bull = herd
    uow = make_uow(farm, [cow, bull])

    with pytest.raises(ValidationError):
        await get_animal_kpis.execute(uow, farm.id, bull.id, defaults=ReproThresholds())


@pytest.mark.asyncio
async def test_selection_view_validates_paging(herd):
    farm, cow, _ = herd
    uow = make_uow(farm, [cow])

    with pytest.raises(ValidationError):
        await selection_view.execute(uow, farm.id, defaults=ReproThresholds(), limit=0)
    with pytest.raises(ValidationError):
        await selection_view.execute(uow, farm.id, defaults=ReproThresholds(), limit=201)
    with pytest.raises(ValidationError):
        await selection_view.execute(uow, farm.id, defaults=ReproThresholds(), offset=-1)


@pytest.mark.asyncio
async def test_selection_view_only_alerts(herd):
    farm, cow, bull = herd
    calm = Animal(id=uuid4(), farm_id=farm.id, tag="G-102")
    events = [empty_check(cow, date(2024, 3, 1))]
    uow = make_uow(farm, [cow, calm, bull], events)

    everything = await selection_view.execute(
        uow, farm.id, defaults=ReproThresholds(), today=date(2024, 3, 10)
    )
    alerts = await selection_view.execute(
        uow, farm.id, defaults=ReproThresholds(), only_alerts=True, today=date(2024, 3, 10)
    )

    assert everything.total == 2
    assert alerts.total == 1
    assert alerts.items[0].animal.id == cow.id


@pytest.mark.asyncio
async def test_summary_report_on_empty_farm(herd):
    farm, _, _ = herd
    uow = make_uow(farm, [])

    report = await summary_report.execute(uow, farm.id, defaults=ReproThresholds())

    assert report.summary.totals.females == 0
    assert report.summary.preg_rate is None
    assert report.top_alerts == []
    assert report.decisions == []


@pytest.mark.asyncio
async def test_summary_report_unknown_farm(herd):
    farm, _, _ = herd
    uow = make_uow(farm, [])

    with pytest.raises(NotFound):
        await summary_report.execute(uow, uuid4(), defaults=ReproThresholds())
