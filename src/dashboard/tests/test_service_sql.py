"""DashboardService against the SQL read models sharing one session."""

from datetime import timedelta

from src.dashboard.service import DashboardService
from src.guests.dtos import GuestStatus
from src.guests.repository.read_models import SqlCoupleReadModel, SqlGuestReadModel
from src.guests.repository.tests.helpers import add_couple, add_group, add_guest
from src.guests.tests.inmemory_models import NOW


async def test_get_dashboard_stats_on_shared_session(db_session):
    couple = await add_couple(db_session, "Gemma", "Jansen")
    group = await add_group(db_session, "The Bakkers", country="Netherlands")
    for offset, (name, status) in enumerate(
        [("Anna", GuestStatus.CONFIRMED), ("Bas", GuestStatus.DECLINED), ("Cas", GuestStatus.PENDING)]
    ):
        await add_guest(
            db_session,
            name,
            group=group,
            invited_by=couple,
            rsvp_status=status,
            created_at=NOW + timedelta(minutes=offset),
        )

    service = DashboardService(
        SqlGuestReadModel(session_overwrite=db_session),
        SqlCoupleReadModel(session_overwrite=db_session),
    )
    stats = await service.get_dashboard_stats(now=NOW + timedelta(hours=1))

    attendance = stats.attendance
    assert (attendance.confirmed, attendance.declined, attendance.pending) == (1, 1, 1)
    assert stats.attendance.response_rate == 67
    assert stats.group_stats.partial_response_groups == 1
    assert stats.country_stats.top_countries[0].country == "Netherlands"
    assert stats.country_stats.top_countries[0].guest_count == 3
    assert stats.inviter_stats["Gemma Jansen"].total == 3
    assert len(stats.recent_activity) == 5
