from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from divisions.types import TeamId


def pair_key(a: TeamId, b: TeamId) -> Tuple[TeamId, TeamId]:
    """Order-independent key for a team pair."""
    return (a, b) if a <= b else (b, a)


@dataclass(frozen=True, slots=True)
class Matchup:
    """A date-less game. The home/away direction is fixed at generation time."""

    home_team_id: TeamId
    away_team_id: TeamId
    played: bool = False

    @property
    def opp_key(self) -> Tuple[TeamId, TeamId]:
        return pair_key(self.home_team_id, self.away_team_id)

    def involves(self, team_id: TeamId) -> bool:
        return team_id == self.home_team_id or team_id == self.away_team_id
