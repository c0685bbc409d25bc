from __future__ import annotations

"""Location -> division assignment.

assign_division() is pure and idempotent: the balancer relies on it to recover
the natural division of a team it is about to relocate.

Lookup order:
1) exact match of the team's canonical location
2) substring scan of the display name; the longest matching key wins and ties
   go to table order
3) DEFAULT_DIVISION for the tier
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from config import require_tier

from .config import DEFAULT_DIVISION, LOCATION_TO_DIVISIONS, NEIGHBORS_BY_TIER
from .types import Team

logger = logging.getLogger(__name__)

# Longest keys first; sorted() is stable so equal lengths keep table order.
_KEYS_BY_SPECIFICITY: Tuple[str, ...] = tuple(sorted(LOCATION_TO_DIVISIONS.keys(), key=len, reverse=True))


def match_location(name: str) -> Optional[str]:
    """Return the most specific location key contained in a display name."""
    text = str(name or "")
    if not text:
        return None
    for key in _KEYS_BY_SPECIFICITY:
        if key in text:
            return key
    return None


def resolve_location(team: Team) -> Optional[str]:
    loc = (team.location or "").strip()
    if loc in LOCATION_TO_DIVISIONS:
        return loc
    return match_location(team.name)


def natural_division(location: Optional[str], tier: int) -> str:
    t = require_tier(tier)
    if location and location in LOCATION_TO_DIVISIONS:
        return LOCATION_TO_DIVISIONS[location][t - 1]
    return DEFAULT_DIVISION[t]


def assign_division(team: Team, tier: int) -> str:
    """Return the team's natural division for a tier."""
    return natural_division(resolve_location(team), tier)


def assign_missing_divisions(teams: Iterable[Team], tier: int) -> List[Team]:
    """Fill empty divisions from location; pre-populated divisions are kept."""
    out: List[Team] = []
    for team in teams:
        if team.division:
            out.append(team)
            continue
        div = assign_division(team, tier)
        logger.debug("assign_missing_divisions: tier=%s team=%s -> %s", tier, team.team_id, div)
        out.append(team.with_division(div))
    return out


def validate_location_table() -> Dict[int, List[Tuple[str, str]]]:
    """Return {tier: [(location, division), ...]} for divisions missing from the tier graph."""
    problems: Dict[int, List[Tuple[str, str]]] = {}
    for loc, triple in LOCATION_TO_DIVISIONS.items():
        for idx, div in enumerate(triple):
            tier = idx + 1
            if div not in NEIGHBORS_BY_TIER[tier]:
                problems.setdefault(tier, []).append((loc, div))
    return problems


def ambiguous_locations(names: Sequence[str]) -> Dict[str, List[str]]:
    """For each name, list every table key it contains when more than one matches.

    Useful for auditing new team names; assignment itself always resolves
    deterministically via match_location().
    """
    out: Dict[str, List[str]] = {}
    for name in names:
        hits = [k for k in LOCATION_TO_DIVISIONS if k in str(name)]
        if len(hits) > 1:
            out[str(name)] = hits
    return out
