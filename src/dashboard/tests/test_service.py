"""Tests for DashboardService."""

import logging

from src.dashboard.service import DashboardService
from src.guests.dtos import GuestStatus
from src.guests.tests.inmemory_models import (
    NOW,
    FailingCoupleReadModel,
    InMemoryCoupleReadModel,
    InMemoryGuestReadModel,
    create_test_couple,
    create_test_group,
    create_test_guest,
)


def _snapshot(couple):
    group = create_test_group(
        name="The Bakkers",
        guests=[
            create_test_guest(rsvp_status=GuestStatus.CONFIRMED, invited_by=couple.id),
            create_test_guest(rsvp_status=GuestStatus.DECLINED, invited_by=couple.id),
        ],
        country="Netherlands",
    )
    return InMemoryGuestReadModel(groups=[group])


async def test_get_dashboard_stats_reads_both_collections():
    couple = create_test_couple()
    guest_read_model = _snapshot(couple)
    service = DashboardService(guest_read_model, InMemoryCoupleReadModel([couple]))

    stats = await service.get_dashboard_stats(now=NOW)

    assert sorted(guest_read_model.calls) == ["get_all_guests", "get_groups_with_guests"]
    assert stats.attendance.total_invited == 2
    assert stats.group_stats.total_groups == 1
    assert stats.inviter_stats["Gemma Jansen"].response_rate == 100


async def test_inviter_failure_degrades_only_inviter_stats(caplog):
    couple = create_test_couple()
    service = DashboardService(_snapshot(couple), FailingCoupleReadModel())

    with caplog.at_level(logging.ERROR, logger="src.dashboard.service"):
        stats = await service.get_dashboard_stats(now=NOW)

    assert stats.inviter_stats == {}
    assert stats.attendance.confirmed == 1
    assert stats.country_stats.total_countries == 1
    assert "Failed to calculate inviter stats" in caplog.text


async def test_repeated_calls_are_identical():
    couple = create_test_couple()
    service = DashboardService(_snapshot(couple), InMemoryCoupleReadModel([couple]))

    first = await service.get_dashboard_stats(now=NOW)
    second = await service.get_dashboard_stats(now=NOW)

    assert first == second


async def test_get_attendance_over_time():
    guest_read_model = InMemoryGuestReadModel(
        guests=[create_test_guest(rsvp_status=GuestStatus.CONFIRMED, created_at=NOW)]
    )
    service = DashboardService(guest_read_model, InMemoryCoupleReadModel())

    history = await service.get_attendance_over_time(now=NOW)

    assert guest_read_model.calls == ["get_all_guests"]
    assert history[-1].confirmed == 1
