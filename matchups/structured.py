from __future__ import annotations

"""Structured matchup generator (tier 1, two conferences of three divisions).

Every team plays division-mates DIVISION_GAMES times and other-conference
teams CROSS_CONFERENCE_GAMES times. For each same-conference division pair
(A, B), two non-colliding permutations mark two B-opponents per A-team as
CONFERENCE_REDUCED_GAMES (3-game) pairs; the rest play CONFERENCE_FULL_GAMES.

The two 3-game edges of each row lean opposite ways (one favors the A side at
home, the other favors the B side), and a coin flip per division pair decides
which permutation carries which lean. Every team therefore gets exactly one
extra home game and one extra road game from its 3-game pairs, so an 82-game
team ends 41/41.
"""

import logging
import random
from collections import OrderedDict
from typing import Dict, List, Optional, Sequence, Tuple

from divisions.config import CONFERENCE_BY_DIVISION, TIER_BALANCE
from divisions.types import Team, TeamId

from .config import (
    CONFERENCE_FULL_GAMES,
    CONFERENCE_REDUCED_GAMES,
    CROSS_CONFERENCE_GAMES,
    DIVISION_GAMES,
    PERMUTATION_MAX_ATTEMPTS,
)
from .pairing import build_downgrade_permutations, expand_pair
from .types import Matchup, pair_key

logger = logging.getLogger(__name__)


def group_by_division(teams: Sequence[Team]) -> "OrderedDict[str, List[Team]]":
    """Group teams by division (known divisions first, in config order)."""
    known = list(TIER_BALANCE[1].divisions)
    buckets: Dict[str, List[Team]] = {}
    for t in teams:
        buckets.setdefault(t.division, []).append(t)

    out: "OrderedDict[str, List[Team]]" = OrderedDict()
    for div in known:
        if div in buckets:
            out[div] = sorted(buckets[div], key=lambda t: t.team_id)
    for div in sorted(d for d in buckets if d not in out):
        out[div] = sorted(buckets[div], key=lambda t: t.team_id)
    return out


def plan_pair_games(
    teams: Sequence[Team],
    rng: random.Random,
) -> Tuple[Dict[Tuple[TeamId, TeamId], int], Dict[Tuple[TeamId, TeamId], TeamId]]:
    """Return (games per pair, favored home side for odd pairs)."""
    by_div = group_by_division(teams)
    ordered = sorted(teams, key=lambda t: t.team_id)

    counts: Dict[Tuple[TeamId, TeamId], int] = {}
    favored: Dict[Tuple[TeamId, TeamId], TeamId] = {}

    for i, a in enumerate(ordered):
        for b in ordered[i + 1:]:
            key = pair_key(a.team_id, b.team_id)
            if a.division == b.division:
                counts[key] = DIVISION_GAMES
                continue
            conf_a = CONFERENCE_BY_DIVISION.get(a.division)
            conf_b = CONFERENCE_BY_DIVISION.get(b.division)
            if conf_a is None or conf_a != conf_b:
                counts[key] = CROSS_CONFERENCE_GAMES
            else:
                counts[key] = CONFERENCE_FULL_GAMES

    divs = list(by_div.keys())
    for i, div_a in enumerate(divs):
        for div_b in divs[i + 1:]:
            conf = CONFERENCE_BY_DIVISION.get(div_a)
            if conf is None or conf != CONFERENCE_BY_DIVISION.get(div_b):
                continue
            side_a = by_div[div_a]
            side_b = by_div[div_b]
            if len(side_a) != len(side_b) or len(side_a) < 2:
                logger.warning(
                    "STRUCTURED_UNEVEN_DIVISION_PAIR div_a=%s size_a=%s div_b=%s size_b=%s (all pairs keep %s games)",
                    div_a,
                    len(side_a),
                    div_b,
                    len(side_b),
                    CONFERENCE_FULL_GAMES,
                )
                continue

            p1, p2 = build_downgrade_permutations(len(side_a), rng, max_attempts=PERMUTATION_MAX_ATTEMPTS)
            a_leans_first = rng.random() < 0.5
            for row, team_a in enumerate(side_a):
                first = side_b[p1[row]]
                second = side_b[p2[row]]
                k1 = pair_key(team_a.team_id, first.team_id)
                k2 = pair_key(team_a.team_id, second.team_id)
                counts[k1] = CONFERENCE_REDUCED_GAMES
                counts[k2] = CONFERENCE_REDUCED_GAMES
                if a_leans_first:
                    favored[k1] = team_a.team_id
                    favored[k2] = second.team_id
                else:
                    favored[k1] = first.team_id
                    favored[k2] = team_a.team_id

    return counts, favored


def generate_structured_matchups(
    teams: Sequence[Team],
    *,
    rng: random.Random,
    num_games: Optional[int] = None,
) -> List[Matchup]:
    """Expand the tier-1 pair plan into shuffled matchups.

    The season length follows from the division structure (82 games for six
    divisions of five). num_games is only logged here; generate_matchups
    compares the result against it and reports any mismatch.
    """
    counts, favored = plan_pair_games(teams, rng)

    matchups: List[Matchup] = []
    for key in sorted(counts):
        a, b = key
        matchups.extend(expand_pair(a, b, counts[key], rng, favored=favored.get(key)))

    rng.shuffle(matchups)
    logger.info(
        "STRUCTURED_MATCHUPS teams=%s matchups=%s target_games=%s",
        len(teams),
        len(matchups),
        num_games,
    )
    return matchups
