from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException

from config import require_tier
from season_calendar import (
    days_to_next_game,
    games_on_date,
    is_regular_season_complete,
    is_tier_complete,
    next_game_date,
    next_team_game_date,
    schedule_summary,
)
from app.schemas.schedule import GenerateScheduleRequest
from app.services import schedule_store
from app.services.schedule_store import ScheduleNotFoundError

router = APIRouter()


@router.post("/api/schedule/generate")
async def api_generate_schedule(req: GenerateScheduleRequest):
    try:
        tiers = tuple(require_tier(t) for t in req.tiers) if req.tiers else None
        schedule = schedule_store.generate(season_year=req.season_year, rng_seed=req.rng_seed, tiers=tiers)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return schedule_store.generation_summary(schedule)


@router.get("/api/schedule/date/{date_iso}")
async def api_games_on_date(date_iso: str):
    try:
        schedule = schedule_store.get_current()
        by_tier = games_on_date(schedule.schedules, date_iso)
    except ScheduleNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "date": date_iso,
        "tiers": {str(t): [e.to_dict() for e in entries] for t, entries in by_tier.items()},
        "total": sum(len(entries) for entries in by_tier.values()),
    }


@router.get("/api/schedule/next-date")
async def api_next_game_date(current_date: str):
    try:
        schedule = schedule_store.get_current()
        nxt = next_game_date(schedule.schedules, current_date)
    except ScheduleNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"current_date": current_date, "next_date": nxt}


@router.get("/api/schedule/team/{team_id}/next")
async def api_next_team_game(team_id: str, current_date: str):
    try:
        schedule = schedule_store.get_current()
        ts = schedule_store.find_team_tier(schedule, team_id)
        nxt: Optional[str] = next_team_game_date(ts.entries, team_id, current_date)
        days = days_to_next_game(ts.entries, team_id, current_date)
    except ScheduleNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "team_id": team_id,
        "tier": ts.tier,
        "current_date": current_date,
        "next_date": nxt,
        "days_to_next_game": days,
    }


@router.get("/api/schedule/tier/{tier}/complete")
async def api_tier_complete(tier: int):
    try:
        ts = schedule_store.get_tier(tier)
    except ScheduleNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"tier": ts.tier, "complete": is_tier_complete(ts.entries)}


@router.get("/api/schedule/complete")
async def api_regular_season_complete():
    try:
        schedule = schedule_store.get_current()
    except ScheduleNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"season_year": schedule.season_year, "complete": is_regular_season_complete(schedule.schedules)}


@router.get("/api/schedule/tier/{tier}/summary")
async def api_tier_summary(tier: int):
    try:
        ts = schedule_store.get_tier(tier)
    except ScheduleNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "tier": ts.tier,
        "num_games": ts.num_games,
        "total_games": len(ts.entries),
        "teams": schedule_summary(ts.entries),
        "diagnostics": ts.diagnostics.to_dict(),
    }
