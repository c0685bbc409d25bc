from __future__ import annotations

"""Read-only queries over finalized tier schedules.

`schedules` arguments are mappings of tier -> entries. Nothing here mutates
an entry; callers flip `played` themselves.
"""

from collections import defaultdict
from typing import Any, Dict, List, Mapping, Optional, Sequence

from divisions.types import TeamId, norm_team_id
from game_time import days_between, require_date_iso, to_date

from .dates import SeasonDates
from .types import ScheduleEntry

Schedules = Mapping[int, Sequence[ScheduleEntry]]


def tier_games_on_date(entries: Sequence[ScheduleEntry], date_iso: Any) -> List[ScheduleEntry]:
    d = require_date_iso(date_iso)
    return [e for e in entries if e.date == d]


def games_on_date(schedules: Schedules, date_iso: Any) -> Dict[int, List[ScheduleEntry]]:
    """Entries on a date for every tier present (empty lists included)."""
    d = require_date_iso(date_iso)
    return {int(tier): tier_games_on_date(entries, d) for tier, entries in sorted(schedules.items())}


def next_game_date(schedules: Schedules, current_date_iso: Any) -> Optional[str]:
    """Earliest date after current_date_iso with an unplayed game in any tier."""
    cur = require_date_iso(current_date_iso, field="current_date")
    best: Optional[str] = None
    for entries in schedules.values():
        for e in entries:
            if e.played or e.date <= cur:
                continue
            if best is None or e.date < best:
                best = e.date
    return best


def next_team_game_date(entries: Sequence[ScheduleEntry], team_id: Any, current_date_iso: Any) -> Optional[str]:
    """Earliest date after current_date_iso on which team_id has an unplayed game."""
    tid = norm_team_id(team_id)
    cur = require_date_iso(current_date_iso, field="current_date")
    best: Optional[str] = None
    for e in entries:
        if e.played or e.date <= cur or not e.involves(tid):
            continue
        if best is None or e.date < best:
            best = e.date
    return best


def days_to_next_game(entries: Sequence[ScheduleEntry], team_id: Any, current_date_iso: Any) -> Optional[int]:
    nxt = next_team_game_date(entries, team_id, current_date_iso)
    if nxt is None:
        return None
    return days_between(to_date(current_date_iso), to_date(nxt))


def is_tier_complete(entries: Optional[Sequence[ScheduleEntry]]) -> bool:
    """True when every entry is played. A missing schedule counts as complete."""
    if not entries:
        return True
    return all(e.played for e in entries)


def is_regular_season_complete(schedules: Schedules) -> bool:
    return all(is_tier_complete(entries) for entries in schedules.values())


def calendar_event(date_iso: Any, season_dates: SeasonDates) -> Optional[str]:
    """Human-readable label for a notable date, or None."""
    d = to_date(date_iso)
    sd = season_dates
    if d == sd.trade_deadline:
        return "Trade Deadline"
    if d == sd.all_star_start:
        return "All-Star Weekend Begins"
    if sd.all_star_start < d < sd.all_star_end:
        return "All-Star Break"
    if d == sd.all_star_end:
        return "All-Star Break (Final Day)"
    if d == sd.draft_lottery:
        return "Draft Lottery"
    if d == sd.draft_day:
        return "Draft Day"
    if d == sd.free_agency_start:
        return "Free Agency Opens"
    return None


def schedule_summary(entries: Sequence[ScheduleEntry]) -> Dict[TeamId, Dict[str, int]]:
    """Per-team totals: games, home, away, played, remaining."""
    out: Dict[TeamId, Dict[str, int]] = defaultdict(
        lambda: {"games": 0, "home": 0, "away": 0, "played": 0, "remaining": 0}
    )
    for e in entries:
        for tid, side in ((e.home_team_id, "home"), (e.away_team_id, "away")):
            row = out[tid]
            row["games"] += 1
            row[side] += 1
            if e.played:
                row["played"] += 1
            else:
                row["remaining"] += 1
    return dict(sorted(out.items()))
