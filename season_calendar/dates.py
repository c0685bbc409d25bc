from __future__ import annotations

"""Season calendar milestones.

All tiers share one end date and one All-Star break; starts are staggered:

- tier 1: 3rd Tuesday of October
- tier 2: 1st Tuesday of November
- tier 3: 1st Tuesday of December

Everything after the regular season (playoffs, draft, free agency, camp) is
fixed to a calendar day of the following year.
"""

import datetime as _dt
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Tuple

from config import require_tier
from game_time import iter_dates, nth_weekday_of_month, to_date

_TUESDAY = 1


@dataclass(frozen=True, slots=True)
class SeasonDates:
    season_year: int
    t1_start: _dt.date
    t2_start: _dt.date
    t3_start: _dt.date
    season_end: _dt.date
    all_star_start: _dt.date
    all_star_end: _dt.date
    trade_deadline: _dt.date
    playoffs_start: _dt.date
    season_official_end: _dt.date
    draft_lottery: _dt.date
    draft_day: _dt.date
    college_fa: _dt.date
    free_agency_start: _dt.date
    free_agency_end: _dt.date
    roster_compliance: _dt.date
    player_development: _dt.date
    owner_decisions: _dt.date
    training_camp: _dt.date

    def tier_start(self, tier: int) -> _dt.date:
        t = require_tier(tier)
        return {1: self.t1_start, 2: self.t2_start, 3: self.t3_start}[t]

    def tier_window(self, tier: int) -> Tuple[_dt.date, _dt.date]:
        return self.tier_start(tier), self.season_end

    def is_all_star_break(self, d: Any) -> bool:
        day = to_date(d)
        return self.all_star_start <= day <= self.all_star_end

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for k, v in asdict(self).items():
            out[k] = v.isoformat() if isinstance(v, _dt.date) else v
        return out


def get_season_dates(season_year: int) -> SeasonDates:
    y = int(season_year)
    nxt = y + 1
    return SeasonDates(
        season_year=y,
        t1_start=nth_weekday_of_month(y, 10, _TUESDAY, 3),
        t2_start=nth_weekday_of_month(y, 11, _TUESDAY, 1),
        t3_start=nth_weekday_of_month(y, 12, _TUESDAY, 1),
        season_end=_dt.date(nxt, 4, 12),
        all_star_start=_dt.date(nxt, 2, 13),
        all_star_end=_dt.date(nxt, 2, 18),
        trade_deadline=_dt.date(nxt, 3, 5),
        playoffs_start=_dt.date(nxt, 4, 16),
        season_official_end=_dt.date(nxt, 6, 1),
        draft_lottery=_dt.date(nxt, 6, 8),
        draft_day=_dt.date(nxt, 6, 15),
        college_fa=_dt.date(nxt, 6, 22),
        free_agency_start=_dt.date(nxt, 7, 1),
        free_agency_end=_dt.date(nxt, 7, 15),
        roster_compliance=_dt.date(nxt, 7, 16),
        player_development=_dt.date(nxt, 8, 1),
        owner_decisions=_dt.date(nxt, 8, 10),
        training_camp=_dt.date(nxt, 8, 16),
    )


def candidate_dates(
    start: Any,
    end: Any,
    season_dates: Optional[SeasonDates] = None,
) -> List[_dt.date]:
    """Every day in [start, end] except the All-Star break."""
    s = to_date(start, field="start")
    e = to_date(end, field="end")
    if e < s:
        raise ValueError(f"end ({e.isoformat()}) is before start ({s.isoformat()})")
    if season_dates is None:
        return list(iter_dates(s, e))
    return [d for d in iter_dates(s, e) if not season_dates.is_all_star_break(d)]
