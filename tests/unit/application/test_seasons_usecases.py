from __future__ import annotations

from datetime import date
from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.errors import ConflictError, NotFound, ValidationError
from src.application.use_cases.farms import create_farm, set_repro_mode, update_repro_settings
from src.application.use_cases.reproduction import record_repro_event
from src.application.use_cases.seasons import add_exposures, create_season, delete_season
from src.domain.models.animal import Animal
from src.domain.models.breeding_season import BreedingSeason
from src.domain.models.farm import Farm
from src.domain.value_objects.repro_mode import ReproMode
from src.domain.value_objects.repro_thresholds import ReproThresholds


def make_uow(farm: Farm, *, animals=(), season=None, exposures=0, season_events=0):
    added: list = []
    by_id = {a.id: a for a in animals}

    async def get_farm(farm_id):
        return farm if farm_id == farm.id else None

    async def update_farm(updated):
        return updated

    async def get_animal(farm_id, animal_id):
        return by_id.get(animal_id)

    async def list_animals(farm_id, *, sex=None, search=None, ids=None):
        return [
            a
            for a in animals
            if (sex is None or a.sex == sex) and (ids is None or a.id in ids)
        ]

    async def get_season(farm_id, season_id):
        return season if season and season.id == season_id else None

    async def add(item):
        added.append(item)
        return item

    async def delete(item):
        added.append(("deleted", item))

    async def count_exposures(season_id):
        return exposures

    async def count_events(season_id):
        return season_events

    async def add_many(season_id, animal_ids):
        return len(animal_ids)

    async def list_exposures(season_id):
        return []

    async def upsert_config(config):
        added.append(config)
        return config

    return SimpleNamespace(
        added=added,
        farms=SimpleNamespace(get=get_farm, update=update_farm),
        farm_repro_config=SimpleNamespace(upsert=upsert_config),
        animals=SimpleNamespace(get=get_animal, list=list_animals),
        seasons=SimpleNamespace(get=get_season, add=add, delete=delete),
        exposures=SimpleNamespace(
            count=count_exposures, add_many=add_many, list=list_exposures
        ),
        repro_events=SimpleNamespace(add=add, count_by_season=count_events),
    )


@pytest.mark.asyncio
async def test_create_season_requires_seasonal_farm():
    farm = Farm(id=uuid4(), name="Fazenda Contínua")
    uow = make_uow(farm)

    with pytest.raises(ValidationError):
        await create_season.execute(
            uow,
            farm.id,
            create_season.CreateSeasonInput(
                name="2024/25", start_at=date(2024, 10, 1), end_at=date(2025, 1, 31)
            ),
        )
    assert uow.added == []


@pytest.mark.asyncio
async def test_create_season_validates_dates():
    farm = Farm(id=uuid4(), name="Fazenda Estação", repro_mode=ReproMode.ESTACAO)
    uow = make_uow(farm)

    with pytest.raises(ValidationError):
        await create_season.execute(
            uow,
            farm.id,
            create_season.CreateSeasonInput(
                name="2024/25", start_at=date(2025, 2, 1), end_at=date(2025, 1, 31)
            ),
        )

    season = await create_season.execute(
        uow,
        farm.id,
        create_season.CreateSeasonInput(
            name=" 2024/25 ", start_at=date(2024, 10, 1), end_at=date(2025, 1, 31)
        ),
    )
    assert season.name == "2024/25"
    assert uow.added == [season]


@pytest.mark.asyncio
async def test_delete_season_with_links_conflicts():
    farm = Farm(id=uuid4(), name="Fazenda Estação", repro_mode=ReproMode.ESTACAO)
    season = BreedingSeason.create(farm.id, "2024/25", date(2024, 10, 1), date(2025, 1, 31))
    uow = make_uow(farm, season=season, exposures=3)

    with pytest.raises(ConflictError):
        await delete_season.execute(uow, farm.id, season.id)

    with pytest.raises(NotFound):
        await delete_season.execute(uow, farm.id, uuid4())


@pytest.mark.asyncio
async def test_add_exposures_rejects_males():
    farm = Farm(id=uuid4(), name="Fazenda Estação", repro_mode=ReproMode.ESTACAO)
    season = BreedingSeason.create(farm.id, "2024/25", date(2024, 10, 1), date(2025, 1, 31))
    cow = Animal(id=uuid4(), farm_id=farm.id, tag="V-1")
    bull = Animal(id=uuid4(), farm_id=farm.id, tag="T-1", sex="MACHO")
    uow = make_uow(farm, animals=[cow, bull], season=season)

    with pytest.raises(ValidationError) as exc_info:
        await add_exposures.execute(uow, farm.id, season.id, [cow.id, bull.id])
    assert exc_info.value.details == {"animal_ids": [str(bull.id)]}

    result = await add_exposures.execute(uow, farm.id, season.id, [cow.id, cow.id])
    assert result.created_count == 1
    assert result.existing_count == 0


@pytest.mark.asyncio
async def test_set_repro_mode_rejects_unknown_mode():
    farm = Farm(id=uuid4(), name="Fazenda")
    uow = make_uow(farm)

    with pytest.raises(ValidationError):
        await set_repro_mode.execute(uow, farm.id, "ANUAL")

    updated = await set_repro_mode.execute(uow, farm.id, "estacao")
    assert updated.repro_mode is ReproMode.ESTACAO


@pytest.mark.asyncio
async def test_update_repro_settings_checks_ordering():
    farm = Farm(id=uuid4(), name="Fazenda")
    uow = make_uow(farm)

    with pytest.raises(ValidationError):
        await update_repro_settings.execute(
            uow,
            farm.id,
            update_repro_settings.UpdateReproSettingsInput(open_days_warning=200),
            ReproThresholds(),
        )

    resolved = await update_repro_settings.execute(
        uow,
        farm.id,
        update_repro_settings.UpdateReproSettingsInput(open_days_warning=90),
        ReproThresholds(),
    )
    assert resolved.open_days_warning == 90
    assert resolved.open_days_critical == 180


@pytest.mark.asyncio
async def test_diagnosis_without_status_is_rejected():
    farm = Farm(id=uuid4(), name="Fazenda")
    cow = Animal(id=uuid4(), farm_id=farm.id, tag="V-1")
    uow = make_uow(farm, animals=[cow])

    with pytest.raises(ValidationError):
        await record_repro_event.execute(
            uow,
            farm.id,
            record_repro_event.RecordReproEventInput(
                animal_id=cow.id, type="DIAGNOSTICO_PRENHEZ", event_date="2024-03-01"
            ),
        )
    with pytest.raises(ValidationError):
        await record_repro_event.execute(
            uow,
            farm.id,
            record_repro_event.RecordReproEventInput(
                animal_id=cow.id, type="PARTO", event_date="01/03/2024"
            ),
        )

    event = await record_repro_event.execute(
        uow,
        farm.id,
        record_repro_event.RecordReproEventInput(
            animal_id=cow.id,
            type="diagnostico_prenhez",
            event_date="2024-03-01",
            payload={"status": "vacia"},
        ),
    )
    assert event.pregnancy_status is not None
    assert event.pregnancy_status.value == "VACIA"


@pytest.mark.asyncio
async def test_create_farm_validates_and_rejects_duplicates():
    existing = Farm(id=uuid4(), name="Fazenda Velha")
    uow = make_uow(existing)
    stored: list = []

    async def add_farm(farm):
        stored.append(farm)
        return farm

    uow.farms.add = add_farm

    with pytest.raises(ValidationError):
        await create_farm.execute(uow, create_farm.CreateFarmInput(name="  "))
    with pytest.raises(ValidationError):
        await create_farm.execute(
            uow, create_farm.CreateFarmInput(name="Nova", repro_mode="ANUAL")
        )
    with pytest.raises(ConflictError):
        await create_farm.execute(
            uow, create_farm.CreateFarmInput(name="Nova", farm_id=existing.id)
        )

    farm = await create_farm.execute(
        uow, create_farm.CreateFarmInput(name=" Nova ", repro_mode="estacao")
    )
    assert farm.name == "Nova"
    assert farm.repro_mode is ReproMode.ESTACAO
    assert stored == [farm]
