from __future__ import annotations

"""Post-hoc checks over a distributed schedule.

Generation degrades instead of failing, so callers that need strict
guarantees run these and decide what to do (accept, or regenerate with
another seed).
"""

from collections import Counter, defaultdict
from typing import Dict, Iterable, List, Sequence, Set, Tuple

from divisions.types import TeamId
from game_time import add_days, to_date
from matchups.types import pair_key

from .types import ScheduleEntry


def team_game_counts(entries: Iterable[ScheduleEntry]) -> Dict[TeamId, int]:
    c: Counter = Counter()
    for e in entries:
        c[e.home_team_id] += 1
        c[e.away_team_id] += 1
    return dict(c)


def game_count_mismatches(
    entries: Iterable[ScheduleEntry],
    team_ids: Iterable[TeamId],
    num_games: int,
) -> Dict[TeamId, int]:
    counts = team_game_counts(entries)
    return {tid: int(counts.get(tid, 0)) for tid in team_ids if int(counts.get(tid, 0)) != int(num_games)}


def pair_home_away_imbalances(
    entries: Iterable[ScheduleEntry],
    *,
    max_diff: int = 1,
) -> Dict[Tuple[TeamId, TeamId], Tuple[int, int]]:
    """Pairs whose home split differs by more than max_diff.

    Values are (home games of key[0], home games of key[1]).
    """
    homes: Dict[Tuple[TeamId, TeamId], List[int]] = defaultdict(lambda: [0, 0])
    for e in entries:
        key = pair_key(e.home_team_id, e.away_team_id)
        homes[key][0 if e.home_team_id == key[0] else 1] += 1
    return {k: (v[0], v[1]) for k, v in homes.items() if abs(v[0] - v[1]) > int(max_diff)}


def _dates_by_team(entries: Iterable[ScheduleEntry], *, include_forced: bool) -> Dict[TeamId, Set[str]]:
    out: Dict[TeamId, Set[str]] = defaultdict(set)
    for e in entries:
        if e.forced and not include_forced:
            continue
        out[e.home_team_id].add(e.date)
        out[e.away_team_id].add(e.date)
    return out


def rest_violations(
    entries: Iterable[ScheduleEntry],
    *,
    include_forced: bool = False,
) -> List[Tuple[TeamId, str]]:
    """(team_id, date) for each date that is a team's third straight game day."""
    out: List[Tuple[TeamId, str]] = []
    for tid, dates in sorted(_dates_by_team(entries, include_forced=include_forced).items()):
        for d_iso in sorted(dates):
            d = to_date(d_iso)
            if add_days(d, -1).isoformat() in dates and add_days(d, -2).isoformat() in dates:
                out.append((tid, d_iso))
    return out


def double_bookings(entries: Sequence[ScheduleEntry]) -> List[Tuple[str, TeamId]]:
    """(date, team_id) for every team with more than one game on a date."""
    c: Counter = Counter()
    for e in entries:
        c[(e.date, e.home_team_id)] += 1
        c[(e.date, e.away_team_id)] += 1
    return sorted(k for k, n in c.items() if n > 1)
