from __future__ import annotations

from fastapi import APIRouter, HTTPException

from season_calendar import calendar_event, get_season_dates

router = APIRouter()


@router.get("/api/calendar/{season_year}")
async def api_season_dates(season_year: int):
    try:
        season_dates = get_season_dates(season_year)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return season_dates.to_dict()


@router.get("/api/calendar/{season_year}/event/{date_iso}")
async def api_calendar_event(season_year: int, date_iso: str):
    try:
        event = calendar_event(date_iso, get_season_dates(season_year))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"season_year": season_year, "date": date_iso, "event": event}
