"""Season calendar: milestones, date distribution, schedule queries.

Public API:
    - SeasonDates, get_season_dates(season_year), candidate_dates(start, end, season_dates)
    - ScheduleEntry
    - compute_date_targets(dates, total, team_count), distribute_matchups(matchups, dates)
    - query helpers (games_on_date, next_game_date, next_team_game_date, ...)
    - invariant checks (rest_violations, double_bookings, ...)
"""

from .dates import SeasonDates, candidate_dates, get_season_dates
from .distribute import compute_date_targets, distribute_matchups
from .invariants import (
    double_bookings,
    game_count_mismatches,
    pair_home_away_imbalances,
    rest_violations,
    team_game_counts,
)
from .query import (
    calendar_event,
    days_to_next_game,
    games_on_date,
    is_regular_season_complete,
    is_tier_complete,
    next_game_date,
    next_team_game_date,
    schedule_summary,
    tier_games_on_date,
)
from .types import ScheduleEntry

__all__ = [
    "SeasonDates",
    "ScheduleEntry",
    "calendar_event",
    "candidate_dates",
    "compute_date_targets",
    "days_to_next_game",
    "distribute_matchups",
    "double_bookings",
    "game_count_mismatches",
    "games_on_date",
    "get_season_dates",
    "is_regular_season_complete",
    "is_tier_complete",
    "next_game_date",
    "next_team_game_date",
    "pair_home_away_imbalances",
    "rest_violations",
    "schedule_summary",
    "team_game_counts",
    "tier_games_on_date",
]
