"""Matchup generation (date-less home/away pairings).

Public API:
    - generate_matchups(teams, tier=..., num_games=..., rng=...)
    - build_downgrade_permutations(n, rng, max_attempts=...)
    - tally_games(matchups) / count_mismatches(teams, matchups, num_games)
"""

from .pairing import PairLedger, build_downgrade_permutations, expand_pair, split_home_away
from .service import count_mismatches, generate_matchups, tally_games
from .types import Matchup, pair_key

__all__ = [
    "Matchup",
    "PairLedger",
    "build_downgrade_permutations",
    "count_mismatches",
    "expand_pair",
    "generate_matchups",
    "pair_key",
    "split_home_away",
    "tally_games",
]
