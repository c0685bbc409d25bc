from __future__ import annotations

"""Tuning knobs for matchup generation.

Tier 1 (structured)
-------------------
Per pair of teams:
- same division:                      DIVISION_GAMES (2H/2A)
- same conference, other division:    CONFERENCE_FULL_GAMES or CONFERENCE_REDUCED_GAMES
- other conference:                   CROSS_CONFERENCE_GAMES (1H/1A)

With 6 divisions of 5 this yields 16 + (6x4 + 4x3) + 15x2 = 82 games per team.

Tiers 2/3 (phased)
------------------
Phase 1 plays INTRA_DIVISION_GAMES per division-mate, then neighbor divisions
fill the remainder. Tiers listed in TWO_HOP_TIERS may extend one hop further
before the fallback phase.
"""

from typing import FrozenSet

DIVISION_GAMES: int = 4
CONFERENCE_FULL_GAMES: int = 4
CONFERENCE_REDUCED_GAMES: int = 3
CROSS_CONFERENCE_GAMES: int = 2

# Randomized search budget for the second (non-colliding) downgrade permutation.
PERMUTATION_MAX_ATTEMPTS: int = 100

INTRA_DIVISION_GAMES: int = 6

TWO_HOP_TIERS: FrozenSet[int] = frozenset({2})

# Safety cap on sweeps per phase (each productive sweep adds at least one game).
MAX_SWEEPS_PER_PHASE: int = 10_000
