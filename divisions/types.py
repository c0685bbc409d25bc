from __future__ import annotations

"""Division domain types.

Conventions aligned with this codebase:
- team_id is a string (seeded leagues use the numeric id as text, e.g. "1004")
- tier is 1..3 (1 = top flight)
- division names are tier-scoped; "Southwest" in tier 1 and tier 2 are different
  divisions.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from .config import CONFERENCE_BY_DIVISION

TeamId = str


def norm_team_id(v: Any) -> str:
    """Normalize team id into canonical form used across the project."""
    return str(v if v is not None else "").strip()


@dataclass(frozen=True, slots=True)
class Team:
    """Scheduling view of a member organization.

    Identity (team_id/name/location/tier) never changes. A division change
    produces a new Team via with_division().
    """

    team_id: TeamId
    name: str
    tier: int
    location: str = ""
    division: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "team_id", norm_team_id(self.team_id))
        object.__setattr__(self, "tier", int(self.tier))

    @property
    def conference(self) -> Optional[str]:
        if self.tier != 1:
            return None
        return CONFERENCE_BY_DIVISION.get(self.division)

    def with_division(self, division: str) -> "Team":
        return replace(self, division=str(division))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "team_id": self.team_id,
            "name": self.name,
            "tier": self.tier,
            "location": self.location,
            "division": self.division,
            "conference": self.conference,
        }


@dataclass(frozen=True, slots=True)
class DivisionMove:
    """One balancer relocation (score: 100 natural, 10 neighbor, 0 other)."""

    team_id: TeamId
    team_name: str
    from_division: str
    to_division: str
    score: int
