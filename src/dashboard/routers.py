from fastapi import APIRouter

from .features.get_attendance_over_time.router import router as get_attendance_over_time_router
from .features.get_stats.router import router as get_stats_router

router = APIRouter()

router.include_router(get_stats_router)
router.include_router(get_attendance_over_time_router)
