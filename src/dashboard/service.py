import asyncio
import logging
from datetime import datetime

from src.dashboard.aggregator import (
    build_dashboard_stats,
    calculate_attendance_over_time,
    calculate_inviter_stats,
)
from src.dashboard.dtos import DailyAttendanceDTO, DashboardStatsDTO, InviterBreakdownDTO
from src.guests.dtos import GuestDTO
from src.guests.repository.read_models import (
    CoupleReadModel,
    GuestReadModel,
    SqlCoupleReadModel,
    SqlGuestReadModel,
)

logger = logging.getLogger(__name__)


class DashboardService:
    """Fetches a guest/group snapshot and hands it to the aggregator."""

    def __init__(
        self,
        guest_read_model: GuestReadModel,
        couple_read_model: CoupleReadModel,
    ) -> None:
        self._guest_read_model = guest_read_model
        self._couple_read_model = couple_read_model

    async def get_dashboard_stats(self, now: datetime | None = None) -> DashboardStatsDTO:
        """Both snapshot reads run concurrently on the guest read model.

        A read model bound to a single session has to serialise them itself.
        """
        guests, groups = await asyncio.gather(
            self._guest_read_model.get_all_guests(),
            self._guest_read_model.get_groups_with_guests(),
        )
        inviter_stats = await self._get_inviter_stats(guests)

        return build_dashboard_stats(guests, groups, inviter_stats=inviter_stats, now=now)

    async def get_attendance_over_time(
        self, now: datetime | None = None
    ) -> list[DailyAttendanceDTO]:
        guests = await self._guest_read_model.get_all_guests()
        return calculate_attendance_over_time(guests, now=now)

    async def _get_inviter_stats(self, guests: list[GuestDTO]) -> dict[str, InviterBreakdownDTO]:
        # A failed couple lookup only empties the inviter breakdown
        try:
            couples = await self._couple_read_model.get_all_couples()
        except Exception:
            logger.exception("Failed to calculate inviter stats")
            return {}
        return calculate_inviter_stats(guests, couples)


def get_dashboard_service() -> DashboardService:
    """Dependency to get dashboard service instance, shared by the dashboard routers."""
    return DashboardService(
        guest_read_model=SqlGuestReadModel(),
        couple_read_model=SqlCoupleReadModel(),
    )

