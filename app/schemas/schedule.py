from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class GenerateScheduleRequest(BaseModel):
    season_year: Optional[int] = Field(default=None, ge=1900, le=2999)  # season start year
    rng_seed: Optional[int] = None  # fixed seed => reproducible schedule
    tiers: Optional[List[int]] = None  # default: every tier
