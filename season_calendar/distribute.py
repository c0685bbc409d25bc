from __future__ import annotations

"""Calendar distribution: place an unordered matchup list onto candidate dates.

1) per-date target counts from day-of-week weights (compute_date_targets)
2) walk dates in order, retrying carried-over matchups before pulling new
   ones; a matchup lands only if neither team already plays that day and
   neither would play a third day in a row
3) force-place whatever is left (backward scan for a conflict-free date,
   else the final date)
4) sort by date
"""

import datetime as _dt
import logging
import math
from collections import deque
from typing import Any, Deque, Dict, Iterable, List, Optional, Sequence, Set

from divisions.types import TeamId
from game_time import add_days, to_date
from matchups.types import Matchup

from .types import ScheduleEntry

logger = logging.getLogger(__name__)

# Primary game days (Tue, Wed, Fri, Sat) carry more games than secondary ones.
_WEEKDAY_WEIGHTS: Dict[int, float] = {
    0: 0.5,  # Mon
    1: 1.0,  # Tue
    2: 1.0,  # Wed
    3: 0.6,  # Thu
    4: 1.0,  # Fri
    5: 1.0,  # Sat
    6: 0.6,  # Sun
}

# Rolling window of recent play dates kept per team.
_RECENT_WINDOW = 3


def _weekday_weight(d: _dt.date) -> float:
    return float(_WEEKDAY_WEIGHTS.get(int(d.weekday()), 1.0))


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def compute_date_targets(dates: Sequence[Any], total: int, team_count: int) -> List[int]:
    """Integer game targets per date, summing to `total` when capacity allows.

    Targets start proportional to weight and are clamped to team_count // 2.
    The remainder goes to the highest-weight days with room (lowest target
    first); an excess comes off the lowest-weight days (highest target first).
    Ties fall back to date order, so the result is deterministic.
    """
    days = [to_date(d) for d in dates]
    total = int(total)
    cap = max(0, int(team_count) // 2)
    if not days or total <= 0:
        return [0 for _ in days]

    weights = [_weekday_weight(d) for d in days]
    total_weight = sum(weights)
    targets = [max(0, min(_round_half_up(w / total_weight * total), cap)) for w in weights]

    current = sum(targets)
    while current < total:
        eligible = [i for i in range(len(days)) if targets[i] < cap]
        if not eligible:
            break
        i = min(eligible, key=lambda j: (-weights[j], targets[j], j))
        targets[i] += 1
        current += 1
    while current > total:
        eligible = [i for i in range(len(days)) if targets[i] > 0]
        if not eligible:
            break
        i = min(eligible, key=lambda j: (weights[j], -targets[j], j))
        targets[i] -= 1
        current -= 1

    if current != total:
        logger.warning(
            "CALENDAR_TARGET_SHORTFALL dates=%s cap=%s total=%s placed_capacity=%s",
            len(days),
            cap,
            total,
            current,
        )
    return targets


def _would_play_third_straight(team_id: TeamId, d: _dt.date, recent: Dict[TeamId, Deque[_dt.date]]) -> bool:
    window = recent.get(team_id)
    if not window or len(window) < 2:
        return False
    return add_days(d, -1) in window and add_days(d, -2) in window


def _can_place(m: Matchup, d: _dt.date, playing: Set[TeamId], recent: Dict[TeamId, Deque[_dt.date]]) -> bool:
    if m.home_team_id in playing or m.away_team_id in playing:
        return False
    if _would_play_third_straight(m.home_team_id, d, recent):
        return False
    if _would_play_third_straight(m.away_team_id, d, recent):
        return False
    return True


def _team_count(matchups: Iterable[Matchup]) -> int:
    seen: Set[TeamId] = set()
    for m in matchups:
        seen.add(m.home_team_id)
        seen.add(m.away_team_id)
    return len(seen)


def distribute_matchups(
    matchups: Sequence[Matchup],
    dates: Sequence[Any],
    *,
    team_count: Optional[int] = None,
) -> List[ScheduleEntry]:
    """Assign every matchup a date; returns entries sorted by date."""
    matchups = list(matchups)
    if not matchups:
        return []

    days = sorted({to_date(d) for d in dates})
    if not days:
        raise ValueError("distribute_matchups: no candidate dates")
    if team_count is None:
        team_count = _team_count(matchups)

    targets = compute_date_targets(days, len(matchups), int(team_count))

    placed: List[ScheduleEntry] = []
    teams_on: Dict[_dt.date, Set[TeamId]] = {}
    recent: Dict[TeamId, Deque[_dt.date]] = {}
    unplaced: List[Matchup] = []
    idx = 0

    for d, target in zip(days, targets):
        playing: Set[TeamId] = set()
        d_iso = d.isoformat()
        n = 0

        carry: List[Matchup] = []
        for m in unplaced:
            if n >= target or not _can_place(m, d, playing, recent):
                carry.append(m)
                continue
            placed.append(ScheduleEntry.from_matchup(m, d_iso))
            playing.add(m.home_team_id)
            playing.add(m.away_team_id)
            n += 1
        unplaced = carry

        while n < target and idx < len(matchups):
            m = matchups[idx]
            idx += 1
            if not _can_place(m, d, playing, recent):
                unplaced.append(m)
                continue
            placed.append(ScheduleEntry.from_matchup(m, d_iso))
            playing.add(m.home_team_id)
            playing.add(m.away_team_id)
            n += 1

        for team_id in playing:
            recent.setdefault(team_id, deque(maxlen=_RECENT_WINDOW)).append(d)
        teams_on[d] = playing

    leftovers = unplaced + matchups[idx:]
    if leftovers:
        logger.warning(
            "CALENDAR_FORCED_PLACEMENT matchups=%s dates=%s (rest rule relaxed)",
            len(leftovers),
            len(days),
        )
        placed.extend(_force_place(leftovers, days, teams_on))

    placed.sort(key=lambda e: e.date)
    logger.info(
        "CALENDAR_DISTRIBUTED entries=%s dates=%s first=%s last=%s forced=%s",
        len(placed),
        len(days),
        placed[0].date,
        placed[-1].date,
        len(leftovers),
    )
    return placed


def _force_place(
    leftovers: Sequence[Matchup],
    days: Sequence[_dt.date],
    teams_on: Dict[_dt.date, Set[TeamId]],
) -> List[ScheduleEntry]:
    """Backward scan (starting one day earlier per matchup) for a free date."""
    out: List[ScheduleEntry] = []
    n_days = len(days)
    last = n_days - 1
    for k, m in enumerate(leftovers):
        chosen: Optional[_dt.date] = None
        start = (last - k) % n_days
        for tries in range(n_days):
            d = days[(start - tries) % n_days]
            busy = teams_on.setdefault(d, set())
            if m.home_team_id not in busy and m.away_team_id not in busy:
                chosen = d
                break
        if chosen is None:
            chosen = days[last]
            logger.warning(
                "CALENDAR_FORCED_CONFLICT home=%s away=%s date=%s",
                m.home_team_id,
                m.away_team_id,
                chosen.isoformat(),
            )
        teams_on.setdefault(chosen, set()).update((m.home_team_id, m.away_team_id))
        out.append(ScheduleEntry.from_matchup(m, chosen.isoformat(), forced=True))
    return out
