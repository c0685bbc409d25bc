from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from divisions.types import TeamId
from matchups.types import Matchup


@dataclass(slots=True)
class ScheduleEntry:
    """A Matchup placed on a calendar date (ISO YYYY-MM-DD).

    `played` is flipped by whoever simulates the game; nothing in the
    scheduling code mutates an entry after distribution. `forced` marks
    entries placed by the forced-placement fallback (rest rule ignored).
    """

    home_team_id: TeamId
    away_team_id: TeamId
    date: str
    played: bool = False
    forced: bool = False

    @classmethod
    def from_matchup(cls, m: Matchup, date_iso: str, *, forced: bool = False) -> "ScheduleEntry":
        return cls(
            home_team_id=m.home_team_id,
            away_team_id=m.away_team_id,
            date=date_iso,
            played=bool(m.played),
            forced=bool(forced),
        )

    def involves(self, team_id: TeamId) -> bool:
        return team_id == self.home_team_id or team_id == self.away_team_id

    def to_dict(self) -> Dict[str, Any]:
        return {
            "home_team_id": self.home_team_id,
            "away_team_id": self.away_team_id,
            "date": self.date,
            "played": bool(self.played),
            "forced": bool(self.forced),
        }
