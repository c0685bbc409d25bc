"""Division assignment and balancing subsystem.

Public API
----------
- Team, DivisionMove
- assign_division, assign_missing_divisions, natural_division
- balance_divisions, BalanceResult
- build_tier_teams, build_default_league

Static tables (locations, neighbor graphs, size bounds) live in divisions.config.
"""

from .assign import assign_division, assign_missing_divisions, natural_division, validate_location_table
from .balance import BalanceResult, balance_divisions, division_sizes
from .seed import build_default_league, build_tier_teams
from .types import DivisionMove, Team

__all__ = [
    "Team",
    "DivisionMove",
    "assign_division",
    "assign_missing_divisions",
    "natural_division",
    "validate_location_table",
    "BalanceResult",
    "balance_divisions",
    "division_sizes",
    "build_tier_teams",
    "build_default_league",
]
