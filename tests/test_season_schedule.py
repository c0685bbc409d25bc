"""
End-to-end pipeline: assign -> balance -> generate -> distribute -> export.
"""

import random

import pytest

from divisions import Team, build_tier_teams
from season_calendar import get_season_dates
from season_schedule import (
    build_league_schedule,
    build_tier_schedule,
    ensure_master_schedule_indices,
    to_master_schedule,
    validate_master_schedule_entry,
)


@pytest.fixture(name="league", scope="module")
def league_fixture():
    return build_league_schedule(season_year=2025, rng_seed=1234)


def test_tier1_schedule_is_complete_and_clean():
    sd = get_season_dates(2025)
    ts = build_tier_schedule(build_tier_teams(1), tier=1, season_dates=sd, rng=random.Random(4))

    assert len(ts.entries) == 1230
    assert ts.diagnostics.count_mismatches == {}
    assert ts.diagnostics.pair_imbalances == {}
    assert ts.diagnostics.rest_violations == []
    assert ts.diagnostics.double_bookings == []
    assert ts.start == "2025-10-21"
    assert ts.end == "2026-04-12"
    assert all(ts.start <= e.date <= ts.end for e in ts.entries)
    assert not any(sd.is_all_star_break(e.date) for e in ts.entries)


def test_teams_without_divisions_are_assigned_first():
    names = [t.name for t in build_tier_teams(1)]
    teams = [Team(team_id=str(i), name=name, tier=1) for i, name in enumerate(names)]
    ts = build_tier_schedule(teams, tier=1, season_dates=get_season_dates(2025), rng=random.Random(0))

    assert {t.division for t in ts.teams} == {"Atlantic", "Central", "Southeast", "Northwest", "Pacific", "Southwest"}
    assert ts.balance.moves == []
    assert ts.diagnostics.count_mismatches == {}


def test_league_has_every_tier(league):
    assert sorted(league.tiers) == [1, 2, 3]
    assert len(league.tiers[2].entries) == 86 * 60 // 2
    assert len(league.tiers[3].entries) == 144 * 40 // 2
    for tier, ts in league.tiers.items():
        assert ts.diagnostics.count_mismatches == {}, tier
        assert ts.diagnostics.rest_violations == [], tier
        assert ts.entries[0].date >= league.season_dates.tier_start(tier).isoformat()


def test_same_seed_same_league(league):
    again = build_league_schedule(season_year=2025, rng_seed=1234)
    for tier in (1, 2, 3):
        assert [e.to_dict() for e in again.tiers[tier].entries] == [e.to_dict() for e in league.tiers[tier].entries]


def test_tier_subset(make_teams):
    teams = make_teams(3, ["Greater Los Angeles MBL", "Bay Area MBL"], 6)
    league = build_league_schedule({3: teams}, season_year=2025, rng_seed=5)
    assert list(league.tiers) == [3]
    assert len(league.tiers[3].entries) == 12 * 40 // 2
    with pytest.raises(ValueError):
        league.tier(1)


def test_master_schedule_export(league):
    master = to_master_schedule(league)
    games = master["games"]

    assert len(games) == sum(len(ts.entries) for ts in league.tiers.values())
    assert len(master["by_id"]) == len(games)
    assert len(master["by_team"]["0"]) == 82
    assert len(master["by_team"]["2000"]) == 40
    assert sum(len(ids) for ids in master["by_date"].values()) == len(games)
    assert [g["date"] for g in games] == sorted(g["date"] for g in games)

    g = games[0]
    assert g["game_id"] == f"{g['date']}_{g['home_team_id']}_{g['away_team_id']}" or g["game_id"].startswith(
        f"{g['date']}_{g['home_team_id']}_{g['away_team_id']}_"
    )
    assert g["status"] == "scheduled"


def test_master_schedule_validation():
    good = {
        "game_id": "2025-10-21_0_1",
        "date": "2025-10-21",
        "tier": 1,
        "home_team_id": "0",
        "away_team_id": "1",
        "status": "scheduled",
    }
    validate_master_schedule_entry(good)

    for bad in (
        {**good, "status": "postponed"},
        {**good, "tier": 7},
        {**good, "away_team_id": "0"},
        {k: v for k, v in good.items() if k != "date"},
        {**good, "forced": "yes"},
    ):
        with pytest.raises(ValueError):
            validate_master_schedule_entry(bad)

    with pytest.raises(ValueError):
        ensure_master_schedule_indices({"games": [good, dict(good)]})
