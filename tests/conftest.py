import random

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services import schedule_store
from divisions import Team, build_tier_teams


@pytest.fixture(name="rng")
def rng_fixture():
    return random.Random(20250101)


@pytest.fixture(name="tier1_teams", scope="session")
def tier1_teams_fixture():
    """The 30-team seed tier: 6 divisions of 5."""
    return build_tier_teams(1)


@pytest.fixture(name="make_teams")
def make_teams_fixture():
    """Factory for synthetic teams named "<division> <n>" placed straight into divisions."""

    def _make(tier, divisions, per_division, *, start_id=0):
        teams = []
        next_id = start_id
        for div in divisions:
            for n in range(per_division):
                teams.append(Team(team_id=str(next_id), name=f"{div} {n}", tier=tier, division=div))
                next_id += 1
        return teams

    return _make


@pytest.fixture(name="client")
def client_fixture():
    """Test client with a clean in-memory schedule store."""
    schedule_store.set_current(None)
    with TestClient(app) as client:
        yield client
    schedule_store.set_current(None)
