"""
HTTP surface: generation plus the read-only schedule queries.
"""

import pytest

from app.services import schedule_store
from app.services.schedule_store import ScheduleNotFoundError


@pytest.fixture(name="generated")
def generated_fixture(client):
    resp = client.post("/api/schedule/generate", json={"season_year": 2025, "rng_seed": 42, "tiers": [1]})
    assert resp.status_code == 200
    return resp.json()


def test_queries_before_generation_are_404(client):
    assert client.get("/api/schedule/complete").status_code == 404
    assert client.get("/api/schedule/date/2025-10-21").status_code == 404
    assert client.get("/api/schedule/tier/1/summary").status_code == 404


def test_generate_summary(generated):
    assert generated["season_year"] == 2025
    assert generated["rng_seed"] == 42
    assert generated["season_dates"]["t1_start"] == "2025-10-21"
    tier1 = generated["tiers"]["1"]
    assert tier1["total_games"] == 1230
    assert tier1["diagnostics"]["count_mismatches"] == {}
    assert len(tier1["teams"]) == 30


def test_generate_rejects_bad_input(client):
    assert client.post("/api/schedule/generate", json={"tiers": [5]}).status_code == 400
    assert client.post("/api/schedule/generate", json={"season_year": 1800}).status_code == 422


def test_games_on_date(client, generated):
    body = client.get("/api/schedule/date/2025-10-21").json()
    assert body["total"] == len(body["tiers"]["1"]) > 0
    assert client.get("/api/schedule/date/not-a-date").status_code == 400


def test_next_dates(client, generated):
    body = client.get("/api/schedule/next-date", params={"current_date": "2025-10-20"}).json()
    assert body["next_date"] == "2025-10-21"

    team = client.get("/api/schedule/team/0/next", params={"current_date": "2025-10-20"}).json()
    assert team["tier"] == 1
    assert team["next_date"] >= "2025-10-21"
    assert team["days_to_next_game"] >= 1

    assert client.get("/api/schedule/team/nobody/next", params={"current_date": "2025-10-20"}).status_code == 404


def test_completion_and_summary(client, generated):
    assert client.get("/api/schedule/tier/1/complete").json() == {"tier": 1, "complete": False}
    assert client.get("/api/schedule/complete").json()["complete"] is False
    assert client.get("/api/schedule/tier/2/complete").status_code == 404
    assert client.get("/api/schedule/tier/9/summary").status_code == 400

    summary = client.get("/api/schedule/tier/1/summary").json()
    assert summary["total_games"] == 1230
    assert {row["games"] for row in summary["teams"].values()} == {82}
    assert {row["home"] for row in summary["teams"].values()} == {41}


def test_calendar_endpoints(client):
    assert client.get("/api/calendar/2025").json()["t2_start"] == "2025-11-04"
    body = client.get("/api/calendar/2025/event/2026-03-05").json()
    assert body["event"] == "Trade Deadline"
    assert client.get("/api/calendar/2025/event/2025-11-11").json()["event"] is None
    assert client.get("/api/calendar/2025/event/11-11-2025").status_code == 400


def test_calendar_out_of_range_year_is_400(client):
    assert client.get("/api/calendar/0").status_code == 400
    assert client.get("/api/calendar/9999").status_code == 400
    assert client.get("/api/calendar/0/event/2026-03-05").status_code == 400


def test_store_tier_lookup(generated):
    assert schedule_store.get_tier(1).tier == 1
    with pytest.raises(ScheduleNotFoundError):
        schedule_store.get_tier(2)
    with pytest.raises(ValueError):
        schedule_store.get_tier(9)
