from __future__ import annotations

"""Greedy geo-aware division balancer.

Each iteration finds the first division above its maximum size and relocates
the single best (team, destination) pair:

    score 100  destination is the team's natural division
    score  10  destination neighbors the overflowing division
    score   0  any other division with room

Ties keep the first pair found (team order, then division order). The loop
stops when nothing overflows, when no destination has room, or when the tier's
iteration cap is spent. Residual imbalance is reported, never raised.

Caller-owned teams are not mutated; a new list is returned.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from config import require_tier

from .assign import assign_division
from .config import TIER_BALANCE, TierBalanceConfig
from .types import DivisionMove, Team

logger = logging.getLogger(__name__)

SCORE_NATURAL = 100
SCORE_NEIGHBOR = 10
SCORE_OTHER = 0


@dataclass(slots=True)
class BalanceResult:
    tier: int
    teams: List[Team]
    moves: List[DivisionMove] = field(default_factory=list)
    iterations: int = 0
    max_iterations: int = 0
    # Divisions still outside [min, max] after balancing: division -> size.
    oversized: Dict[str, int] = field(default_factory=dict)
    undersized: Dict[str, int] = field(default_factory=dict)

    @property
    def exhausted(self) -> bool:
        return self.iterations >= self.max_iterations and bool(self.oversized)

    @property
    def balanced(self) -> bool:
        return not self.oversized and not self.undersized


def division_sizes(teams: Sequence[Team], divisions: Sequence[str]) -> Dict[str, int]:
    counts = Counter(t.division for t in teams)
    return {d: int(counts.get(d, 0)) for d in divisions}


def _score_move(team: Team, over: str, target: str, cfg: TierBalanceConfig) -> int:
    if target == assign_division(team, cfg.tier):
        return SCORE_NATURAL
    if target in (cfg.neighbors.get(over) or []):
        return SCORE_NEIGHBOR
    return SCORE_OTHER


def balance_divisions(
    teams: Sequence[Team],
    tier: int,
    *,
    cfg: Optional[TierBalanceConfig] = None,
) -> BalanceResult:
    t = require_tier(tier)
    cfg = cfg or TIER_BALANCE[t]
    divisions = list(cfg.divisions)
    work: List[Team] = list(teams)

    result = BalanceResult(tier=t, teams=work, max_iterations=int(cfg.max_iterations))

    while result.iterations < int(cfg.max_iterations):
        sizes = division_sizes(work, divisions)
        over = next((d for d in divisions if sizes[d] > cfg.max_size(d)), None)
        if over is None:
            break
        result.iterations += 1

        best_idx: Optional[int] = None
        best_target: Optional[str] = None
        best_score = -1

        for idx, team in enumerate(work):
            if team.division != over:
                continue
            for target in divisions:
                if target == over or sizes[target] >= cfg.max_size(target):
                    continue
                score = _score_move(team, over, target, cfg)
                if score > best_score:
                    best_idx, best_target, best_score = idx, target, score

        if best_idx is None or best_target is None:
            logger.warning("DIVISION_BALANCE_NO_ROOM tier=%s over=%s size=%s", t, over, sizes[over])
            break

        team = work[best_idx]
        move = DivisionMove(
            team_id=team.team_id,
            team_name=team.name,
            from_division=over,
            to_division=best_target,
            score=int(best_score),
        )
        logger.info("T%s move: %s %s -> %s (score %s)", t, team.name, over, best_target, best_score)
        work[best_idx] = team.with_division(best_target)
        result.moves.append(move)

    sizes = division_sizes(work, divisions)
    result.oversized = {d: n for d, n in sizes.items() if n > cfg.max_size(d)}
    result.undersized = {d: n for d, n in sizes.items() if n < cfg.min_size(d)}

    if result.exhausted:
        logger.warning(
            "DIVISION_BALANCE_EXHAUSTED tier=%s iterations=%s oversized=%r",
            t,
            result.iterations,
            result.oversized,
        )
    elif result.oversized or result.undersized:
        logger.warning(
            "DIVISION_BALANCE_RESIDUAL tier=%s oversized=%r undersized=%r",
            t,
            result.oversized,
            result.undersized,
        )
    return result
