from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from config import TIER_LABELS, TIERS, games_for_tier, require_tier
from divisions import BalanceResult, Team, assign_missing_divisions, balance_divisions, build_default_league
from matchups import generate_matchups
from season_calendar import (
    ScheduleEntry,
    SeasonDates,
    candidate_dates,
    distribute_matchups,
    double_bookings,
    game_count_mismatches,
    get_season_dates,
    pair_home_away_imbalances,
    rest_violations,
)

logger = logging.getLogger(__name__)

# This module only builds and exports schedules. Simulating games (flipping
# `played`) belongs to the caller.

_ALLOWED_SCHEDULE_STATUSES = frozenset({"scheduled", "final"})


def validate_master_schedule_entry(entry: Dict[str, Any], *, path: str = "master_schedule.entry") -> None:
    """
    Minimal contract for master_schedule.games[*].

    Required:
      - game_id: str (non-empty)
      - home_team_id / away_team_id: str (non-empty, distinct)
      - date: str (YYYY-MM-DD)
      - tier: int (known tier)
      - status: str (allowed set)

    Optional (if present, must be correct type):
      - forced: bool
    """
    if not isinstance(entry, dict):
        raise ValueError(f"MasterScheduleEntry invalid: '{path}' must be a dict")

    for k in ("game_id", "home_team_id", "away_team_id", "date", "tier", "status"):
        if k not in entry:
            raise ValueError(f"MasterScheduleEntry invalid: missing {path}.{k}")

    game_id = entry.get("game_id")
    if not isinstance(game_id, str) or not game_id.strip():
        raise ValueError(f"MasterScheduleEntry invalid: {path}.game_id must be a non-empty string")

    for k in ("home_team_id", "away_team_id"):
        v = entry.get(k)
        if not isinstance(v, str) or not v.strip():
            raise ValueError(f"MasterScheduleEntry invalid: {path}.{k} must be a non-empty string")
    if entry["home_team_id"] == entry["away_team_id"]:
        raise ValueError(f"MasterScheduleEntry invalid: {path} home and away are the same team")

    if not isinstance(entry.get("date"), str) or len(entry["date"]) != 10:
        raise ValueError(f"MasterScheduleEntry invalid: {path}.date must be YYYY-MM-DD")

    tier = entry.get("tier")
    if not isinstance(tier, int) or tier not in TIERS:
        raise ValueError(f"MasterScheduleEntry invalid: {path}.tier must be one of {TIERS}")

    status = entry.get("status")
    if not isinstance(status, str) or status not in _ALLOWED_SCHEDULE_STATUSES:
        raise ValueError(
            f"MasterScheduleEntry invalid: {path}.status must be one of {sorted(_ALLOWED_SCHEDULE_STATUSES)}"
        )

    if "forced" in entry and not isinstance(entry["forced"], bool):
        raise ValueError(f"MasterScheduleEntry invalid: {path}.forced must be a bool if present")


def ensure_master_schedule_indices(master_schedule: dict) -> None:
    """Validate the minimal contract and make sure the by_id index exists."""
    if not isinstance(master_schedule, dict):
        raise ValueError("master_schedule must be a dict")

    games = master_schedule.get("games") or []
    if not isinstance(games, list):
        raise ValueError("master_schedule.games must be a list")

    for i, g in enumerate(games):
        validate_master_schedule_entry(g, path=f"master_schedule.games[{i}]")
    by_id = master_schedule.get("by_id")
    if not isinstance(by_id, dict) or len(by_id) != len(games):
        master_schedule["by_id"] = {g.get("game_id"): g for g in games if isinstance(g, dict) and g.get("game_id")}
    if len(master_schedule["by_id"]) != len(games):
        raise ValueError("master_schedule game_id values must be unique")


@dataclass(frozen=True, slots=True)
class ScheduleDiagnostics:
    """Post-hoc findings for one tier. Empty collections mean the check passed."""

    count_mismatches: Dict[str, int] = field(default_factory=dict)
    pair_imbalances: Dict[Tuple[str, str], Tuple[int, int]] = field(default_factory=dict)
    rest_violations: List[Tuple[str, str]] = field(default_factory=list)
    double_bookings: List[Tuple[str, str]] = field(default_factory=list)
    forced_entries: int = 0

    @property
    def clean(self) -> bool:
        return not (
            self.count_mismatches
            or self.pair_imbalances
            or self.rest_violations
            or self.double_bookings
            or self.forced_entries
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count_mismatches": dict(self.count_mismatches),
            "pair_imbalances": [
                {"teams": list(k), "home_games": list(v)} for k, v in sorted(self.pair_imbalances.items())
            ],
            "rest_violations": [{"team_id": t, "date": d} for t, d in self.rest_violations],
            "double_bookings": [{"date": d, "team_id": t} for d, t in self.double_bookings],
            "forced_entries": int(self.forced_entries),
            "clean": self.clean,
        }


@dataclass(slots=True)
class TierSchedule:
    tier: int
    num_games: int
    start: str
    end: str
    teams: List[Team]
    balance: BalanceResult
    entries: List[ScheduleEntry]
    diagnostics: ScheduleDiagnostics

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tier": self.tier,
            "label": TIER_LABELS[self.tier],
            "num_games": self.num_games,
            "start": self.start,
            "end": self.end,
            "teams": [t.to_dict() for t in self.teams],
            "balance": {
                "iterations": self.balance.iterations,
                "exhausted": self.balance.exhausted,
                "moves": len(self.balance.moves),
            },
            "total_games": len(self.entries),
            "diagnostics": self.diagnostics.to_dict(),
        }


@dataclass(slots=True)
class LeagueSchedule:
    season_year: int
    season_dates: SeasonDates
    tiers: Dict[int, TierSchedule]
    rng_seed: Optional[int] = None

    @property
    def schedules(self) -> Dict[int, List[ScheduleEntry]]:
        return {t: ts.entries for t, ts in sorted(self.tiers.items())}

    def tier(self, tier: int) -> TierSchedule:
        t = require_tier(tier)
        if t not in self.tiers:
            raise ValueError(f"no schedule generated for tier {t}")
        return self.tiers[t]


def diagnose_tier(
    entries: Sequence[ScheduleEntry],
    *,
    tier: int,
    team_ids: Sequence[str],
    num_games: int,
) -> ScheduleDiagnostics:
    diag = ScheduleDiagnostics(
        count_mismatches=game_count_mismatches(entries, team_ids, num_games),
        pair_imbalances=pair_home_away_imbalances(entries),
        rest_violations=rest_violations(entries),
        double_bookings=double_bookings(entries),
        forced_entries=sum(1 for e in entries if e.forced),
    )
    if diag.count_mismatches:
        logger.warning("SCHEDULE_COUNT_MISMATCH tier=%s teams=%s", tier, len(diag.count_mismatches))
    if diag.pair_imbalances:
        logger.warning("SCHEDULE_PAIR_IMBALANCE tier=%s pairs=%s", tier, len(diag.pair_imbalances))
    if diag.rest_violations:
        logger.warning("SCHEDULE_REST_VIOLATION tier=%s count=%s", tier, len(diag.rest_violations))
    if diag.double_bookings:
        logger.warning("SCHEDULE_DOUBLE_BOOKING tier=%s count=%s", tier, len(diag.double_bookings))
    return diag


def build_tier_schedule(
    teams: Sequence[Team],
    *,
    tier: int,
    season_dates: SeasonDates,
    num_games: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> TierSchedule:
    """Assign -> balance -> generate -> distribute -> diagnose, for one tier."""
    tier = require_tier(tier)
    if num_games is None:
        num_games = games_for_tier(tier)
    if rng is None:
        rng = random.Random()

    assigned = assign_missing_divisions(teams, tier)
    balance = balance_divisions(assigned, tier)
    matchups = generate_matchups(balance.teams, tier=tier, num_games=num_games, rng=rng)

    start, end = season_dates.tier_window(tier)
    dates = candidate_dates(start, end, season_dates)
    entries = distribute_matchups(matchups, dates, team_count=len(balance.teams))

    diagnostics = diagnose_tier(
        entries,
        tier=tier,
        team_ids=[t.team_id for t in balance.teams],
        num_games=int(num_games),
    )
    logger.info(
        "TIER_SCHEDULE_BUILT tier=%s teams=%s games=%s dates=%s forced=%s",
        tier,
        len(balance.teams),
        len(entries),
        len(dates),
        diagnostics.forced_entries,
    )
    return TierSchedule(
        tier=tier,
        num_games=int(num_games),
        start=start.isoformat(),
        end=end.isoformat(),
        teams=list(balance.teams),
        balance=balance,
        entries=entries,
        diagnostics=diagnostics,
    )


def build_league_schedule(
    teams_by_tier: Optional[Mapping[int, Sequence[Team]]] = None,
    *,
    season_year: int,
    rng_seed: Optional[int] = None,
) -> LeagueSchedule:
    """
    Build every tier's regular season for one season.

    teams_by_tier defaults to the seed league. A fixed rng_seed reproduces the
    same league schedule; each tier draws its own RNG from the root so tiers do
    not perturb each other.
    """
    if teams_by_tier is None:
        teams_by_tier = build_default_league()

    season_dates = get_season_dates(int(season_year))

    # Root RNG: reproducible when rng_seed is provided.
    root_rng = random.Random(rng_seed)
    tier_seeds = {t: root_rng.randrange(1_000_000_000) for t in TIERS}

    tiers: Dict[int, TierSchedule] = {}
    for tier in sorted(require_tier(t) for t in teams_by_tier):
        teams = list(teams_by_tier[tier])
        if not teams:
            continue
        tiers[tier] = build_tier_schedule(
            teams,
            tier=tier,
            season_dates=season_dates,
            rng=random.Random(int(tier_seeds[tier])),
        )

    return LeagueSchedule(season_year=int(season_year), season_dates=season_dates, tiers=tiers, rng_seed=rng_seed)


def to_master_schedule(league: LeagueSchedule) -> Dict[str, Any]:
    """
    Flat export of every tier:
      {
        "games": [...],
        "by_team": {team_id: [game_id, ...]},
        "by_date": {date_str: [game_id, ...]},
        "by_id": {game_id: entry},
      }
    """
    scheduled_games: List[Dict[str, Any]] = []
    by_date: Dict[str, List[str]] = {}
    by_team: Dict[str, List[str]] = {}
    used: Dict[str, int] = {}

    for tier, ts in sorted(league.tiers.items()):
        for t in ts.teams:
            by_team.setdefault(t.team_id, [])
        for e in ts.entries:
            base_id = f"{e.date}_{e.home_team_id}_{e.away_team_id}"
            n = used.get(base_id, 0) + 1
            used[base_id] = n
            game_id = base_id if n == 1 else f"{base_id}_{n}"

            entry = {
                "game_id": game_id,
                "date": e.date,
                "tier": int(tier),
                "home_team_id": e.home_team_id,
                "away_team_id": e.away_team_id,
                "status": "final" if e.played else "scheduled",
                "forced": bool(e.forced),
            }
            scheduled_games.append(entry)
            by_date.setdefault(e.date, []).append(game_id)
            by_team.setdefault(e.home_team_id, []).append(game_id)
            by_team.setdefault(e.away_team_id, []).append(game_id)

    scheduled_games.sort(key=lambda g: (g["date"], g["tier"]))
    out = {
        "games": scheduled_games,
        "by_team": by_team,
        "by_date": dict(sorted(by_date.items())),
        "by_id": {g["game_id"]: g for g in scheduled_games},
    }

    ensure_master_schedule_indices(out)
    return out
