from __future__ import annotations

"""Pairing primitives shared by both generators.

- split_home_away / expand_pair: turn "N games between A and B" into Matchups
  with a ceil/floor home split.
- build_downgrade_permutations: two permutations over range(n) that never pick
  the same column for the same row (the tier-1 "3-game" bipartite assignment).
- PairLedger: running per-pair home/away counts for incremental generation.
"""

import logging
import random
from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from divisions.types import TeamId

from .config import PERMUTATION_MAX_ATTEMPTS
from .types import Matchup, pair_key

logger = logging.getLogger(__name__)


def split_home_away(n: int, rng: random.Random, *, a_favored: Optional[bool] = None) -> Tuple[int, int]:
    """Return (home games for A, home games for B) for an N-game pairing.

    Odd N gives the extra home game to A when a_favored is True, to B when
    False, and to a random side when None.
    """
    n = int(n)
    lo = n // 2
    hi = n - lo
    if hi == lo:
        return hi, lo
    if a_favored is None:
        a_favored = rng.random() < 0.5
    return (hi, lo) if a_favored else (lo, hi)


def expand_pair(
    a: TeamId,
    b: TeamId,
    n: int,
    rng: random.Random,
    *,
    favored: Optional[TeamId] = None,
) -> List[Matchup]:
    a_favored = None if favored is None else (favored == a)
    a_home, b_home = split_home_away(n, rng, a_favored=a_favored)
    out: List[Matchup] = []
    out.extend(Matchup(home_team_id=a, away_team_id=b) for _ in range(a_home))
    out.extend(Matchup(home_team_id=b, away_team_id=a) for _ in range(b_home))
    return out


def build_downgrade_permutations(
    n: int,
    rng: random.Random,
    *,
    max_attempts: int = PERMUTATION_MAX_ATTEMPTS,
) -> Tuple[List[int], List[int]]:
    """Return (p1, p2) with p1[i] != p2[i] for every row i.

    p1 is a random permutation. p2 is searched randomly for up to max_attempts
    shuffles; if none avoids every collision, the deterministic offset
    p2[i] = p1[(i + 1) % n] is used.
    """
    n = int(n)
    if n < 2:
        raise ValueError(f"need at least 2 teams per division for two permutations, got {n}")

    p1 = list(range(n))
    rng.shuffle(p1)

    for _ in range(int(max_attempts)):
        p2 = list(range(n))
        rng.shuffle(p2)
        if all(p1[i] != p2[i] for i in range(n)):
            return p1, p2

    logger.debug("build_downgrade_permutations: random search exhausted (n=%s); using offset", n)
    p2 = [p1[(i + 1) % n] for i in range(n)]
    return p1, p2


class PairLedger:
    """Per-pair game and home counts.

    add_game() gives home court to whichever side has hosted fewer games in
    that pairing, so every pair stays within one game of an even split.
    """

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng
        self._pair_games: Dict[Tuple[TeamId, TeamId], int] = defaultdict(int)
        self._home: Dict[Tuple[TeamId, TeamId], int] = defaultdict(int)  # (home, away) -> n
        self._team_games: Dict[TeamId, int] = defaultdict(int)
        self.matchups: List[Matchup] = []

    def games(self, a: TeamId, b: TeamId) -> int:
        return int(self._pair_games.get(pair_key(a, b), 0))

    def team_games(self, team_id: TeamId) -> int:
        return int(self._team_games.get(team_id, 0))

    def home_games(self, team_id: TeamId, opponent: TeamId) -> int:
        return int(self._home.get((team_id, opponent), 0))

    def add_game(self, a: TeamId, b: TeamId) -> Matchup:
        a_home = self.home_games(a, b)
        b_home = self.home_games(b, a)
        if a_home < b_home:
            home, away = a, b
        elif b_home < a_home:
            home, away = b, a
        elif self._rng.random() < 0.5:
            home, away = a, b
        else:
            home, away = b, a

        m = Matchup(home_team_id=home, away_team_id=away)
        self._home[(home, away)] += 1
        self._pair_games[pair_key(a, b)] += 1
        self._team_games[a] += 1
        self._team_games[b] += 1
        self.matchups.append(m)
        return m

    def remove_game(self, m: Matchup) -> None:
        """Undo one previously added game (first equal matchup)."""
        self.matchups.remove(m)
        self._home[(m.home_team_id, m.away_team_id)] -= 1
        self._pair_games[pair_key(m.home_team_id, m.away_team_id)] -= 1
        self._team_games[m.home_team_id] -= 1
        self._team_games[m.away_team_id] -= 1
