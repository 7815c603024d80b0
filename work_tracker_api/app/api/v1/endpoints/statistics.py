"""
Statistics endpoint for API v1.

Returns the counters shown on top of the dashboard.
"""

from datetime import date

from fastapi import APIRouter, Depends

from work_tracker_api.app.api.dependencies import get_today
from work_tracker_api.app.schemas.statistics import StatisticsOverview
from work_tracker_api.app.services.statistics_service import StatisticsService


router = APIRouter()


@router.get("/", response_model=StatisticsOverview)
async def get_overview(today: date = Depends(get_today)) -> StatisticsOverview:
    """Counts of records by priority and status, overdue work and clients."""
    return await StatisticsService.overview(today)
