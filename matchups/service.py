from __future__ import annotations

import logging
import random
from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence

from config import games_for_tier, require_tier
from divisions.types import Team, TeamId

from .phased import generate_phased_matchups
from .structured import generate_structured_matchups
from .types import Matchup

logger = logging.getLogger(__name__)


def tally_games(matchups: Iterable[Matchup]) -> Dict[TeamId, int]:
    """Count games per team (home + away)."""
    c: Counter = Counter()
    for m in matchups:
        c[m.home_team_id] += 1
        c[m.away_team_id] += 1
    return dict(c)


def count_mismatches(
    teams: Sequence[Team],
    matchups: Iterable[Matchup],
    num_games: int,
) -> Dict[TeamId, int]:
    """Return {team_id: actual_games} for every team not at num_games."""
    counts = tally_games(matchups)
    out: Dict[TeamId, int] = {}
    for t in teams:
        n = int(counts.get(t.team_id, 0))
        if n != int(num_games):
            out[t.team_id] = n
    return out


def generate_matchups(
    teams: Sequence[Team],
    *,
    tier: int,
    num_games: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[Matchup]:
    """Produce the unordered home/away pairings for one tier.

    Tier 1 uses the structured conference generator; other tiers use the
    phased division-aware generator. Count mismatches are logged, not raised.
    """
    tier = require_tier(tier)
    if num_games is None:
        num_games = games_for_tier(tier)
    num_games = int(num_games)
    if num_games < 0:
        raise ValueError(f"num_games must be >= 0, got {num_games}")
    if rng is None:
        rng = random.Random()

    if not teams:
        return []

    if tier == 1:
        matchups = generate_structured_matchups(teams, rng=rng, num_games=num_games)
    else:
        matchups = generate_phased_matchups(teams, tier=tier, num_games=num_games, rng=rng)

    mismatches = count_mismatches(teams, matchups, num_games)
    if mismatches:
        sample = sorted(mismatches.items())[:10]
        logger.warning(
            "MATCHUP_COUNT_MISMATCH tier=%s target=%s teams=%s sample=%s",
            tier,
            num_games,
            len(mismatches),
            sample,
        )
    return matchups
