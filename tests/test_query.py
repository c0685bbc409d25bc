from season_calendar import (
    ScheduleEntry,
    days_to_next_game,
    game_count_mismatches,
    games_on_date,
    is_regular_season_complete,
    is_tier_complete,
    next_game_date,
    next_team_game_date,
    pair_home_away_imbalances,
    rest_violations,
    schedule_summary,
    team_game_counts,
    tier_games_on_date,
)


def _schedules():
    t1 = [
        ScheduleEntry("a", "b", "2025-10-21", played=True),
        ScheduleEntry("c", "d", "2025-10-21"),
        ScheduleEntry("b", "a", "2025-10-23"),
        ScheduleEntry("a", "c", "2025-10-25"),
    ]
    t2 = [
        ScheduleEntry("x", "y", "2025-10-22"),
    ]
    return {1: t1, 2: t2}


def test_games_on_date_per_tier():
    by_tier = games_on_date(_schedules(), "2025-10-21")
    assert [len(by_tier[1]), len(by_tier[2])] == [2, 0]
    assert tier_games_on_date(_schedules()[2], "2025-10-22")[0].home_team_id == "x"


def test_next_game_date_skips_played_and_current_day():
    schedules = _schedules()
    assert next_game_date(schedules, "2025-10-20") == "2025-10-21"
    assert next_game_date(schedules, "2025-10-21") == "2025-10-22"
    assert next_game_date(schedules, "2025-10-25") is None


def test_next_team_game_date():
    t1 = _schedules()[1]
    assert next_team_game_date(t1, "a", "2025-10-20") == "2025-10-23"
    assert next_team_game_date(t1, "d", "2025-10-21") is None
    assert days_to_next_game(t1, "a", "2025-10-21") == 2
    assert days_to_next_game(t1, "z", "2025-10-21") is None


def test_completion_flags():
    schedules = _schedules()
    assert not is_tier_complete(schedules[1])
    assert is_tier_complete([])
    assert is_tier_complete(None)
    assert not is_regular_season_complete(schedules)

    for entries in schedules.values():
        for e in entries:
            e.played = True
    assert is_regular_season_complete(schedules)


def test_schedule_summary():
    summary = schedule_summary(_schedules()[1])
    assert summary["a"] == {"games": 3, "home": 2, "away": 1, "played": 1, "remaining": 2}
    assert summary["d"]["away"] == 1


def test_invariant_helpers():
    entries = [
        ScheduleEntry("a", "b", "2026-01-01"),
        ScheduleEntry("a", "b", "2026-01-02"),
        ScheduleEntry("b", "a", "2026-01-03"),
        ScheduleEntry("a", "b", "2026-01-04", forced=True),
    ]
    assert team_game_counts(entries) == {"a": 4, "b": 4}
    assert game_count_mismatches(entries, ["a", "b", "c"], 4) == {"c": 0}
    assert pair_home_away_imbalances(entries) == {("a", "b"): (3, 1)}
    assert rest_violations(entries) == [("a", "2026-01-03"), ("b", "2026-01-03")]
    assert len(rest_violations(entries, include_forced=True)) == 4
