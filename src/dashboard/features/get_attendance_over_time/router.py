from fastapi import APIRouter, Depends

from src.dashboard.schemas import DailyAttendanceResponse
from src.dashboard.service import DashboardService, get_dashboard_service
from src.dashboard.urls import GET_ATTENDANCE_OVER_TIME_URL

router = APIRouter()


@router.get(GET_ATTENDANCE_OVER_TIME_URL, response_model=list[DailyAttendanceResponse])
async def get_attendance_over_time(
    service: DashboardService = Depends(get_dashboard_service),
) -> list[DailyAttendanceResponse]:
    """Confirmed/declined counts for the last 30 days, by the day guests were added."""
    history = await service.get_attendance_over_time()
    return [
        DailyAttendanceResponse(date=day.date, confirmed=day.confirmed, declined=day.declined)
        for day in history
    ]
