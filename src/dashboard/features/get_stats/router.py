from dataclasses import asdict

from fastapi import APIRouter, Depends

from src.dashboard.schemas import DashboardStatsResponse
from src.dashboard.service import DashboardService, get_dashboard_service
from src.dashboard.urls import GET_DASHBOARD_STATS_URL

router = APIRouter()


@router.get(GET_DASHBOARD_STATS_URL, response_model=DashboardStatsResponse)
async def get_dashboard_stats(
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardStatsResponse:
    """
    Get the dashboard statistics bundle: attendance, RSVP progress,
    demographics, per-inviter and per-country breakdowns, group stats,
    the recent activity feed and quick numbers.
    """
    stats = await service.get_dashboard_stats()
    return DashboardStatsResponse.model_validate(asdict(stats))
