from __future__ import annotations


async def test_health(client):
    resp = await client.get("/api/v1/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


async def test_status_endpoint_mid_gestation(client):
    resp = await client.get(
        "/api/v1/pregnancy/status",
        params={"conception_date": "2024-01-01", "reference_date": "2024-06-01"},
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["elapsed_days"] == 152
    assert body["stage"] == "Mid"
    assert body["due_date"] == "2024-12-06"
    assert body["days_remaining"] == 188
    assert body["is_overdue"] is False
    assert body["days_overdue"] == 0
    assert round(body["progress_percent"], 1) == 44.7


async def test_status_endpoint_overdue(client):
    resp = await client.get(
        "/api/v1/pregnancy/status",
        params={"conception_date": "2024-01-01", "reference_date": "2025-01-10"},
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["stage"] == "Pre-foaling"
    assert body["progress_percent"] == 100
    assert body["is_overdue"] is True
    assert body["days_remaining"] == -35
    assert body["days_overdue"] == 35


async def test_status_endpoint_rejects_invalid_date(client):
    resp = await client.get(
        "/api/v1/pregnancy/status",
        params={"conception_date": "2024-02-30", "reference_date": "2024-06-01"},
    )
    assert resp.status_code == 422
    body = resp.json()
    assert body["code"] == "invalid_date"
    assert body["details"]["field"] == "conception_date"


async def test_milestones_endpoint_uses_configured_limit(client):
    resp = await client.get("/api/v1/pregnancy/milestones", params={"elapsed_days": 45})
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert [m["day"] for m in body["upcoming"]] == [60, 150, 270]
    assert body["completed"] == [{"day": 30, "label": "Heartbeat detectable"}]


async def test_milestones_endpoint_rejects_bad_limit(client):
    resp = await client.get(
        "/api/v1/pregnancy/milestones", params={"elapsed_days": 45, "limit": 0}
    )
    assert resp.status_code == 422
    assert resp.json()["code"] == "validation_error"


async def test_summary_endpoint_with_breeding_date_alias(client):
    payload = {"lastBreedingDate": "2024-01-01", "referenceDate": "2024-12-01"}
    resp = await client.post("/api/v1/pregnancy/summary", json=payload)
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["status"]["elapsed_days"] == 335
    assert body["status"]["stage"] == "Pre-foaling"
    assert body["due_window"]["expected_due_date"] == "2024-12-06"
    assert body["due_window"]["is_in_due_window"] is True
    assert body["monitoring"]["priority"] == "Critical"
    assert body["monitoring"]["check_frequency_hours"] == 2
    assert body["upcoming"] == []
    assert body["completed"][0]["day"] == 320


async def test_summary_endpoint_custom_milestones(client):
    payload = {
        "conception_date": "2024-01-01",
        "reference_date": "2024-01-21",
        "milestones": [
            {"day": 14, "label": "First scan"},
            {"day": 28, "label": "Heartbeat scan"},
            {"day": 45, "label": "Twin check"},
        ],
        "upcoming_limit": 1,
    }
    resp = await client.post("/api/v1/pregnancy/summary", json=payload)
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["upcoming"] == [{"day": 28, "label": "Heartbeat scan"}]
    assert body["completed"] == [{"day": 14, "label": "First scan"}]


async def test_summary_endpoint_requires_conception_date(client):
    resp = await client.post("/api/v1/pregnancy/summary", json={"referenceDate": "2024-06-01"})
    assert resp.status_code == 422
    assert resp.json()["code"] == "invalid_date"


async def test_status_endpoint_rejects_conception_near_calendar_end(client):
    resp = await client.get(
        "/api/v1/pregnancy/status",
        params={"conception_date": "9999-06-01", "reference_date": "9999-06-02"},
    )
    assert resp.status_code == 422, resp.text
    body = resp.json()
    assert body["code"] == "invalid_date"
    assert body["details"]["field"] == "conception_date"


async def test_status_endpoint_reports_weeks(client):
    resp = await client.get(
        "/api/v1/pregnancy/status",
        params={"conception_date": "2024-01-01", "reference_date": "2024-06-01"},
    )
    body = resp.json()
    assert body["weeks_elapsed"] == 21
    assert body["weeks_remaining"] == 26


async def test_summary_endpoint_non_string_date_gets_invalid_date_body(client):
    resp = await client.post("/api/v1/pregnancy/summary", json={"conceptionDate": 20240101})
    assert resp.status_code == 422
    body = resp.json()
    assert body["code"] == "invalid_date"
    assert body["details"]["field"] == "conception_date"


async def test_summary_endpoint_includes_guidelines_and_signs(client):
    payload = {"conceptionDate": "2024-01-01", "referenceDate": "2024-11-20"}
    resp = await client.post("/api/v1/pregnancy/summary", json=payload)
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["guidelines"]["stage"] == "Pre-foaling"
    assert body["guidelines"]["day_range"] == "311-340 days"
    assert "Check temperature every 6 hours" in body["guidelines"]["monitoring"]
    assert len(body["pre_foaling_signs"]) == 6
    assert body["pre_foaling_signs"][2] == {
        "name": "Waxing",
        "description": "Waxy secretions on teat ends",
        "urgency": 4,
        "time_to_foal": "12-72 hours",
    }
