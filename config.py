from __future__ import annotations

"""League-wide configuration.

Tuning knobs shared by the scheduling subsystems live here. Subsystem-specific
knobs live next to their code (divisions.config, matchups.config).

Environment overrides
---------------------
- LEAGUE_SEASON_YEAR: season start year used by the server when a request does
  not name one.
- LEAGUE_SCHEDULE_SEED: optional root seed for schedule generation. Unset means
  a fresh (non-reproducible) schedule every time.
"""

import os
from typing import Dict, Optional

TIERS = (1, 2, 3)

# Regular season length per tier (games per team).
TIER_GAME_COUNTS: Dict[int, int] = {
    1: 82,
    2: 60,
    3: 40,
}

# Human-readable tier labels (used by the server payloads).
TIER_LABELS: Dict[int, str] = {
    1: "Tier 1",
    2: "Tier 2",
    3: "Tier 3",
}


def _env_int(name: str) -> Optional[int]:
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


DEFAULT_SEASON_YEAR: int = _env_int("LEAGUE_SEASON_YEAR") or 2025
SCHEDULE_RNG_SEED: Optional[int] = _env_int("LEAGUE_SCHEDULE_SEED")


def require_tier(tier: int) -> int:
    """Return tier as int, or raise ValueError for unknown tiers."""
    try:
        t = int(tier)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"tier must be one of {TIERS}, got {tier!r}") from exc
    if t not in TIERS:
        raise ValueError(f"tier must be one of {TIERS}, got {tier!r}")
    return t


def games_for_tier(tier: int) -> int:
    return int(TIER_GAME_COUNTS[require_tier(tier)])
