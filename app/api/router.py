from fastapi import APIRouter

from app.api.routes import calendar, schedule

api_router = APIRouter()
api_router.include_router(schedule.router)
api_router.include_router(calendar.router)
