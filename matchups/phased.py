from __future__ import annotations

"""Phased, division-aware matchup generator (tiers 2 and 3).

Phases run in priority order until every team reaches its target:

1) intra-division: INTRA_DIVISION_GAMES per division-mate (reduced evenly when
   the division is too large for the season length)
2) neighbor divisions: sweep short teams, each taking its least-played short
   opponent from directly neighboring divisions
3) two-hop (TWO_HOP_TIERS only): same sweep over divisions that neighbor a
   neighbor
4) fallback: any other short team; a lone short team swaps into an existing
   game (X-Y becomes T-X and T-Y); otherwise any team at all

Home court per pairing always goes to the side that has hosted fewer games in
that pairing, so no pair drifts more than one game from an even split.
"""

import logging
import random
from collections import OrderedDict
from typing import Callable, List, Optional, Sequence

from divisions.config import NEIGHBORS_BY_TIER
from divisions.types import Team, TeamId

from .config import INTRA_DIVISION_GAMES, MAX_SWEEPS_PER_PHASE, TWO_HOP_TIERS
from .pairing import PairLedger
from .types import Matchup

logger = logging.getLogger(__name__)


def two_hop_divisions(tier: int, division: str) -> List[str]:
    """Divisions reachable through one neighbor that are not direct neighbors."""
    graph = NEIGHBORS_BY_TIER.get(int(tier), {})
    direct = list(graph.get(division, ()))
    out: List[str] = []
    for n in direct:
        for nn in graph.get(n, ()):
            if nn == division or nn in direct or nn in out:
                continue
            out.append(nn)
    return out


class PhasedMatchupBuilder:
    def __init__(self, teams: Sequence[Team], *, tier: int, num_games: int, rng: random.Random) -> None:
        self.tier = int(tier)
        self.num_games = int(num_games)
        self.rng = rng
        self.ledger = PairLedger(rng)

        self.by_div: "OrderedDict[str, List[TeamId]]" = OrderedDict()
        for t in sorted(teams, key=lambda t: (t.division, t.team_id)):
            self.by_div.setdefault(t.division, []).append(t.team_id)
        self.all_ids: List[TeamId] = [tid for ids in self.by_div.values() for tid in ids]

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------
    def is_short(self, team_id: TeamId) -> bool:
        return self.ledger.team_games(team_id) < self.num_games

    def short_teams(self) -> List[TeamId]:
        return [tid for tid in self.all_ids if self.is_short(tid)]

    def _least_played(self, team_id: TeamId, candidates: List[TeamId]) -> Optional[TeamId]:
        if not candidates:
            return None
        self.rng.shuffle(candidates)
        return min(candidates, key=lambda o: (self.ledger.games(team_id, o), self.ledger.team_games(o)))

    def _pool(self, divisions: Sequence[str]) -> List[TeamId]:
        out: List[TeamId] = []
        for d in divisions:
            out.extend(self.by_div.get(d, ()))
        return out

    def _sweep(self, pool_for: Callable[[str], List[TeamId]], phase: str) -> int:
        """Repeat shuffled sweeps until a full pass adds nothing."""
        added = 0
        for _ in range(MAX_SWEEPS_PER_PHASE):
            progress = 0
            divs = list(self.by_div.keys())
            self.rng.shuffle(divs)
            for div in divs:
                pool = pool_for(div)
                if not pool:
                    continue
                for team_id in self.by_div[div]:
                    if not self.is_short(team_id):
                        continue
                    candidates = [o for o in pool if o != team_id and self.is_short(o)]
                    opp = self._least_played(team_id, candidates)
                    if opp is None:
                        continue
                    self.ledger.add_game(team_id, opp)
                    progress += 1
            added += progress
            if progress == 0:
                break
        logger.debug("phase %s (tier %s): added %s games", phase, self.tier, added)
        return added

    # ------------------------------------------------------------------
    # phases
    # ------------------------------------------------------------------
    def intra_division(self) -> int:
        added = 0
        for div, members in self.by_div.items():
            size = len(members)
            if size < 2:
                continue
            per_mate = INTRA_DIVISION_GAMES
            if per_mate * (size - 1) > self.num_games:
                per_mate = self.num_games // (size - 1)
                logger.info(
                    "T%s %s: %s teams, intra-division games per mate reduced to %s",
                    self.tier,
                    div,
                    size,
                    per_mate,
                )
            for i, a in enumerate(members):
                for b in members[i + 1:]:
                    for _ in range(per_mate):
                        self.ledger.add_game(a, b)
                        added += 1
        return added

    def neighbor_fill(self) -> int:
        graph = NEIGHBORS_BY_TIER.get(self.tier, {})
        return self._sweep(lambda div: self._pool(graph.get(div, ())), "neighbors")

    def two_hop_fill(self) -> int:
        return self._sweep(lambda div: self._pool(two_hop_divisions(self.tier, div)), "two_hop")

    def _swap_in(self, team_id: TeamId) -> bool:
        """Replace one X-Y game with T-X and T-Y (X and Y keep their counts).

        Only games whose home side leads (or ties) that pairing are removed, so
        the X-Y home split stays within one game.
        """
        candidates = [
            m
            for m in self.ledger.matchups
            if not m.involves(team_id)
            and self.ledger.home_games(m.home_team_id, m.away_team_id)
            >= self.ledger.home_games(m.away_team_id, m.home_team_id)
        ]
        if not candidates:
            return False
        self.rng.shuffle(candidates)
        m = min(
            candidates,
            key=lambda g: self.ledger.games(team_id, g.home_team_id) + self.ledger.games(team_id, g.away_team_id),
        )
        self.ledger.remove_game(m)
        self.ledger.add_game(team_id, m.home_team_id)
        self.ledger.add_game(team_id, m.away_team_id)
        return True

    def fallback_fill(self) -> int:
        added = 0
        for team_id in self.all_ids:
            while self.is_short(team_id):
                others = [o for o in self.all_ids if o != team_id]
                short = [o for o in others if self.is_short(o)]
                if not short and self.num_games - self.ledger.team_games(team_id) >= 2 and self._swap_in(team_id):
                    added += 1
                    continue
                opp = self._least_played(team_id, short or others)
                if opp is None:
                    break
                self.ledger.add_game(team_id, opp)
                added += 1
        return added

    def build(self) -> List[Matchup]:
        self.intra_division()
        if self.short_teams():
            self.neighbor_fill()
        if self.tier in TWO_HOP_TIERS and self.short_teams():
            self.two_hop_fill()
        if self.short_teams():
            n = self.fallback_fill()
            if n:
                logger.warning("MATCHUP_FALLBACK tier=%s games=%s", self.tier, n)
        return list(self.ledger.matchups)


def generate_phased_matchups(
    teams: Sequence[Team],
    *,
    tier: int,
    num_games: int,
    rng: random.Random,
) -> List[Matchup]:
    builder = PhasedMatchupBuilder(teams, tier=tier, num_games=num_games, rng=rng)
    matchups = builder.build()
    rng.shuffle(matchups)
    logger.info(
        "PHASED_MATCHUPS tier=%s teams=%s matchups=%s target_games=%s",
        tier,
        len(builder.all_ids),
        len(matchups),
        num_games,
    )
    return matchups
