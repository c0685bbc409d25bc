from __future__ import annotations

import logging
from threading import RLock
from typing import Any, Dict, Optional, Tuple

from config import DEFAULT_SEASON_YEAR, SCHEDULE_RNG_SEED, require_tier
from divisions import build_default_league
from season_schedule import LeagueSchedule, TierSchedule, build_league_schedule

logger = logging.getLogger(__name__)

# Process-local only; a restart forgets the generated season.
_STORE_LOCK = RLock()
_CURRENT: Optional[LeagueSchedule] = None


class ScheduleNotFoundError(ValueError):
    pass


def generate(
    *,
    season_year: Optional[int] = None,
    rng_seed: Optional[int] = None,
    tiers: Optional[Tuple[int, ...]] = None,
) -> LeagueSchedule:
    """Build a league schedule and make it the current one."""
    year = int(season_year) if season_year is not None else DEFAULT_SEASON_YEAR
    seed = rng_seed if rng_seed is not None else SCHEDULE_RNG_SEED

    league = build_default_league()
    if tiers:
        league = {t: league[t] for t in tiers if t in league}

    schedule = build_league_schedule(league, season_year=year, rng_seed=seed)
    set_current(schedule)
    logger.info(
        "SCHEDULE_GENERATED season_year=%s seed=%s tiers=%s",
        year,
        seed,
        sorted(schedule.tiers),
    )
    return schedule


def set_current(schedule: Optional[LeagueSchedule]) -> None:
    global _CURRENT
    with _STORE_LOCK:
        _CURRENT = schedule


def get_current() -> LeagueSchedule:
    with _STORE_LOCK:
        if _CURRENT is None:
            raise ScheduleNotFoundError("no schedule generated yet (POST /api/schedule/generate)")
        return _CURRENT


def find_team_tier(schedule: LeagueSchedule, team_id: str) -> TierSchedule:
    tid = str(team_id).strip()
    for ts in schedule.tiers.values():
        if any(t.team_id == tid for t in ts.teams):
            return ts
    raise ScheduleNotFoundError(f"team not found in current schedule: {team_id!r}")


def generation_summary(schedule: LeagueSchedule) -> Dict[str, Any]:
    return {
        "season_year": schedule.season_year,
        "rng_seed": schedule.rng_seed,
        "season_dates": schedule.season_dates.to_dict(),
        "tiers": {str(t): ts.to_dict() for t, ts in sorted(schedule.tiers.items())},
    }


def get_tier(tier: int) -> TierSchedule:
    t = require_tier(tier)
    schedule = get_current()
    try:
        return schedule.tier(t)
    except ValueError as e:
        raise ScheduleNotFoundError(str(e)) from e
