from __future__ import annotations

from datetime import date
from typing import cast
from uuid import uuid4

from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.db.orm.repro_event import ReproEventORM


async def _post_event(client, headers, animal_id, type_, event_date, payload=None, **extra):
    body = {"animal_id": str(animal_id), "type": type_, "event_date": event_date, **extra}
    if payload is not None:
        body["payload"] = payload
    response = await client.post("/api/v1/repro-events/", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def test_farm_header_is_required(client, seeded_farm):
    health = await client.get("/api/v1/health")
    assert health.status_code == 200

    missing = await client.get("/api/v1/genetics/selection")
    assert missing.status_code == 403
    assert missing.json()["code"] == "forbidden"

    invalid = await client.get("/api/v1/genetics/selection", headers={"X-Farm-ID": "fazenda-1"})
    assert invalid.status_code == 403

    unknown = await client.get(
        "/api/v1/genetics/reports/summary", headers={"X-Farm-ID": str(uuid4())}
    )
    assert unknown.status_code == 404
    assert unknown.json()["code"] == "not_found"


async def test_events_kpis_selection_and_summary(client, seeded_farm, farm_headers, seed_animals):
    ids = await seed_animals(
        seeded_farm,
        ("V-1", "FEMEA", "PO-1"),
        ("V-2", "FEMEA", None),
        ("V-3", "FEMEA", None),
        ("T-1", "MACHO", None),
    )

    await _post_event(client, farm_headers, ids["V-1"], "PARTO", "2023-01-10")
    await _post_event(client, farm_headers, ids["V-1"], "PARTO", "2024-01-05")
    await _post_event(
        client, farm_headers, ids["V-1"], "DIAGNOSTICO_PRENHEZ", "2024-02-20", {"status": "VACIA"}
    )
    await _post_event(
        client, farm_headers, ids["V-1"], "DIAGNOSTICO_PRENHEZ", "2024-03-20", {"status": "VACIA"}
    )
    await _post_event(client, farm_headers, ids["V-2"], "PARTO", "2024-01-01")
    created = await _post_event(
        client,
        farm_headers,
        ids["V-2"],
        "DIAGNOSTICO_PRENHEZ",
        "2024-03-01",
        {"status": "prenhe"},
        notes=" toque ",
    )
    assert created["payload"] == {"status": "PRENHE"}
    assert created["notes"] == "toque"

    bad = await client.post(
        "/api/v1/repro-events/",
        json={"animal_id": str(ids["V-3"]), "type": "DIAGNOSTICO_PRENHEZ", "event_date": "2024-03-01"},
        headers=farm_headers,
    )
    assert bad.status_code == 422
    assert bad.json()["code"] == "validation_error"

    events = await client.get(
        "/api/v1/repro-events/", params={"animal_id": str(ids["V-1"])}, headers=farm_headers
    )
    assert events.status_code == 200
    assert [e["event_date"] for e in events.json()["events"]] == [
        "2024-03-20",
        "2024-02-20",
        "2024-01-05",
        "2023-01-10",
    ]

    kpis = await client.get(f"/api/v1/animals/{ids['V-1']}/repro-kpis", headers=farm_headers)
    assert kpis.status_code == 200
    body = kpis.json()
    assert body["kpis"]["iepDays"] == 360
    assert body["kpis"]["emptyAlerts"] == {"isEmpty": True, "isRepeatEmpty": True}
    assert body["kpis"]["lastCalvingDate"] == "2024-01-05"
    assert body["trafficLight"] == "RED"
    assert body["reasons"][0] == "2 vazias seguidas"
    assert body["decision"] is None

    v2 = (await client.get(f"/api/v1/animals/{ids['V-2']}/repro-kpis", headers=farm_headers)).json()
    assert v2["kpis"]["openDays"] == 60
    assert v2["kpis"]["iepDays"] is None
    assert v2["trafficLight"] == "GREEN"

    v3 = (await client.get(f"/api/v1/animals/{ids['V-3']}/repro-kpis", headers=farm_headers)).json()
    assert v3["kpis"]["openDays"] is None
    assert v3["kpis"]["pregRate"] is None
    assert v3["trafficLight"] == "GREEN"
    assert v3["reasons"] == []

    male = await client.get(f"/api/v1/animals/{ids['T-1']}/repro-kpis", headers=farm_headers)
    assert male.status_code == 422
    missing = await client.get(f"/api/v1/animals/{uuid4()}/repro-kpis", headers=farm_headers)
    assert missing.status_code == 404

    selection = await client.get("/api/v1/genetics/selection", headers=farm_headers)
    assert selection.status_code == 200
    assert selection.json()["total"] == 3

    alerts = await client.get(
        "/api/v1/genetics/selection", params={"status": "alert"}, headers=farm_headers
    )
    assert alerts.json()["total"] == 1
    assert alerts.json()["items"][0]["animal"]["tag"] == "V-1"
    assert alerts.json()["items"][0]["animal"]["brinco"] == "V-1"
    assert alerts.json()["items"][0]["animal"]["raca"] == "Gir"

    searched = await client.get(
        "/api/v1/genetics/selection", params={"search": "po-1"}, headers=farm_headers
    )
    assert [i["animal"]["tag"] for i in searched.json()["items"]] == ["V-1"]

    too_many = await client.get(
        "/api/v1/genetics/selection", params={"limit": 500}, headers=farm_headers
    )
    assert too_many.status_code == 422

    summary = await client.get("/api/v1/genetics/reports/summary", headers=farm_headers)
    assert summary.status_code == 200
    report = summary.json()
    assert report["summary"]["openDaysCount"] == 2
    assert report["summary"]["openDaysOver180Pct"] == 0.5
    assert report["summary"]["iepCount"] == 1
    assert report["summary"]["iepAvg"] == 360
    assert report["summary"]["pregRate"] == 1 / 3
    assert report["summary"]["totals"]["females"] == 3
    assert report["summary"]["totals"]["diagCount"] == 3
    assert report["topAlerts"][0]["animal"]["tag"] == "V-1"
    assert len(report["topAlerts"]) == 3
    assert report["decisions"] == []


async def test_selection_decisions_lifecycle(client, seeded_farm, farm_headers, seed_animals):
    ids = await seed_animals(seeded_farm, ("V-1", "FEMEA", None))
    animal_id = str(ids["V-1"])

    rejected = await client.post(
        "/api/v1/genetics/selection/decisions",
        json={"animalId": animal_id, "decision": "DISCARD", "reason": ""},
        headers=farm_headers,
    )
    assert rejected.status_code == 422

    saved = await client.post(
        "/api/v1/genetics/selection/decisions",
        json={"animalId": animal_id, "decision": "DISCARD", "reason": "baixa taxa de prenhez"},
        headers=farm_headers,
    )
    assert saved.status_code == 200
    assert saved.json()["decision"]["decision"] == "DISCARD"

    again = await client.post(
        "/api/v1/genetics/selection/decisions",
        json={"animalId": animal_id, "decision": "WATCH"},
        headers=farm_headers,
    )
    assert again.status_code == 200
    assert again.json()["decision"]["id"] == saved.json()["decision"]["id"]
    assert again.json()["decision"]["reason"] is None

    fetched = await client.get(
        f"/api/v1/genetics/selection/decisions/{animal_id}", headers=farm_headers
    )
    assert fetched.json()["decision"]["decision"] == "WATCH"

    listed = await client.get("/api/v1/genetics/selection/decisions", headers=farm_headers)
    assert len(listed.json()["decisions"]) == 1

    summary = await client.get("/api/v1/genetics/reports/summary", headers=farm_headers)
    decisions = summary.json()["decisions"]
    assert decisions[0]["animal"]["tag"] == "V-1"
    assert decisions[0]["decision"]["decision"] == "WATCH"

    selection = await client.get("/api/v1/genetics/selection", headers=farm_headers)
    assert selection.json()["items"][0]["decision"]["decision"] == "WATCH"

    cleared = await client.delete(
        f"/api/v1/genetics/selection/decisions/{animal_id}", headers=farm_headers
    )
    assert cleared.status_code == 204
    cleared_again = await client.delete(
        f"/api/v1/genetics/selection/decisions/{animal_id}", headers=farm_headers
    )
    assert cleared_again.status_code == 204

    gone = await client.get(
        f"/api/v1/genetics/selection/decisions/{animal_id}", headers=farm_headers
    )
    assert gone.json() == {"decision": None}

    unknown = await client.post(
        "/api/v1/genetics/selection/decisions",
        json={"animalId": str(uuid4()), "decision": "KEEP"},
        headers=farm_headers,
    )
    assert unknown.status_code == 404


async def test_stored_diagnosis_without_status_is_skipped(
    app, client, seeded_farm, farm_headers, seed_animals
):
    ids = await seed_animals(seeded_farm, ("V-1", "FEMEA", None), ("V-2", "FEMEA", None))
    await _post_event(client, farm_headers, ids["V-1"], "PARTO", "2024-01-05")
    await _post_event(client, farm_headers, ids["V-2"], "PARTO", "2024-01-01")
    await _post_event(
        client, farm_headers, ids["V-2"], "DIAGNOSTICO_PRENHEZ", "2024-03-01", {"status": "VACIA"}
    )

    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        async_session = cast(AsyncSession, session)
        async_session.add(
            ReproEventORM(
                id=uuid4(),
                farm_id=seeded_farm,
                animal_id=ids["V-1"],
                type="DIAGNOSTICO_PRENHEZ",
                event_date=date(2024, 3, 1),
                payload={},
            )
        )
        await async_session.commit()

    summary = await client.get("/api/v1/genetics/reports/summary", headers=farm_headers)
    assert summary.status_code == 200
    assert summary.json()["summary"]["totals"]["diagCount"] == 1

    selection = await client.get("/api/v1/genetics/selection", headers=farm_headers)
    assert selection.status_code == 200
    assert selection.json()["total"] == 2

    kpis = await client.get(f"/api/v1/animals/{ids['V-1']}/repro-kpis", headers=farm_headers)
    assert kpis.status_code == 200
    assert kpis.json()["kpis"]["lastCalvingDate"] == "2024-01-05"
    assert kpis.json()["kpis"]["pregRate"] is None

    events = await client.get(
        "/api/v1/repro-events/", params={"animal_id": str(ids["V-1"])}, headers=farm_headers
    )
    assert [e["type"] for e in events.json()["events"]] == ["PARTO"]
