"""Dashboard aggregation.

Pure functions over a snapshot of guests and groups. Nothing here performs I/O
or mutates its inputs, so the same snapshot (and clock) always yields the same
statistics bundle.
"""

from collections.abc import Iterable
from datetime import UTC, datetime, timedelta

from src.dashboard.dtos import (
    ActivityType,
    AttendanceSummaryDTO,
    CountryBreakdownDTO,
    CountryStatsDTO,
    DailyAttendanceDTO,
    DashboardStatsDTO,
    DemographicsDTO,
    GroupStatsDTO,
    InviterBreakdownDTO,
    LargestGroupDTO,
    QuickNumbersDTO,
    RecentActivityDTO,
    RsvpProgressDTO,
    StatusBreakdownDTO,
)
from src.guests.dtos import AgeCategory, CoupleDTO, GroupWithGuestsDTO, GuestDTO, GuestStatus

RECENT_WINDOW = timedelta(days=10)
MAX_RECENT_GUESTS = 5
MAX_RECENT_CONFIRMATIONS = 3
MAX_RECENT_GROUPS = 3
MAX_ACTIVITY_ENTRIES = 8
TOP_COUNTRIES = 5
ATTENDANCE_HISTORY_DAYS = 30


def rounded_ratio(part: int, total: int, scale: int = 1) -> int:
    """round(scale * part / total) with halves rounded up, 0 when total is 0."""
    if total <= 0:
        return 0
    return (2 * scale * part + total) // (2 * total)


def percentage(part: int, total: int) -> int:
    return rounded_ratio(part, total, scale=100)


def count_status(guests: Iterable[GuestDTO], status: GuestStatus) -> int:
    return sum(1 for guest in guests if guest.rsvp_status == status)


def _newest_first(items, key):
    # sorted() is stable, so equal timestamps keep their input order
    return sorted(items, key=key, reverse=True)


def status_breakdown(guests: list[GuestDTO]) -> StatusBreakdownDTO:
    return StatusBreakdownDTO(
        total=len(guests),
        confirmed=count_status(guests, GuestStatus.CONFIRMED),
        pending=count_status(guests, GuestStatus.PENDING),
        declined=count_status(guests, GuestStatus.DECLINED),
    )


def calculate_attendance_summary(guests: list[GuestDTO]) -> AttendanceSummaryDTO:
    total = len(guests)
    confirmed = count_status(guests, GuestStatus.CONFIRMED)
    declined = count_status(guests, GuestStatus.DECLINED)
    pending = count_status(guests, GuestStatus.PENDING)

    return AttendanceSummaryDTO(
        total_invited=total,
        confirmed=confirmed,
        declined=declined,
        pending=pending,
        response_rate=percentage(confirmed + declined, total),
        confirmed_rate=percentage(confirmed, total),
        declined_rate=percentage(declined, total),
    )


def calculate_rsvp_progress(guests: list[GuestDTO]) -> RsvpProgressDTO:
    total_invited = len(guests)
    pending = count_status(guests, GuestStatus.PENDING)
    completed = total_invited - pending
    assert completed == count_status(guests, GuestStatus.CONFIRMED) + count_status(
        guests, GuestStatus.DECLINED
    ), "RSVP status must be one of pending, confirmed or declined"
    progress = percentage(completed, total_invited)

    return RsvpProgressDTO(
        total_responses=completed,
        total_invited=total_invited,
        response_rate=progress,
        pending_responses=pending,
        completed_responses=completed,
        progress_percentage=progress,
    )


def calculate_demographics(guests: list[GuestDTO]) -> DemographicsDTO:
    adults = status_breakdown([g for g in guests if g.age_category == AgeCategory.ADULT])
    children = status_breakdown([g for g in guests if g.age_category == AgeCategory.CHILD])

    return DemographicsDTO(
        adults=adults,
        children=children,
        total_attending=adults.confirmed + children.confirmed,
        total_declined=adults.declined + children.declined,
        total_pending=adults.pending + children.pending,
    )


def calculate_inviter_stats(
    guests: list[GuestDTO], couples: list[CoupleDTO]
) -> dict[str, InviterBreakdownDTO]:
    """Per-couple breakdown keyed by full name, in the order couples are given.

    Couples who invited nobody are left out.
    """
    inviter_stats: dict[str, InviterBreakdownDTO] = {}
    for couple in couples:
        couple_guests = [g for g in guests if g.invited_by == couple.id]
        if not couple_guests:
            continue

        breakdown = status_breakdown(couple_guests)
        inviter_stats[couple.full_name] = InviterBreakdownDTO(
            total=breakdown.total,
            confirmed=breakdown.confirmed,
            pending=breakdown.pending,
            declined=breakdown.declined,
            response_rate=percentage(breakdown.confirmed + breakdown.declined, breakdown.total),
        )
    return inviter_stats


def generate_recent_activity(
    guests: list[GuestDTO],
    groups: list[GroupWithGuestsDTO],
    now: datetime,
) -> list[RecentActivityDTO]:
    """
    Merge recently added guests, confirmed guests and recently created groups
    into one feed, newest first.

    There is no separate RSVP-submitted timestamp, so confirmations are dated
    (and ordered) by when the guest was added.
    """
    window_start = now - RECENT_WINDOW
    activities: list[RecentActivityDTO] = []

    recent_guests = _newest_first(
        (g for g in guests if g.created_at > window_start), key=lambda g: g.created_at
    )[:MAX_RECENT_GUESTS]
    for guest in recent_guests:
        group_suffix = f" to {guest.group_name}" if guest.group_name else ""
        activities.append(
            RecentActivityDTO(
                id=f"guest-{guest.id}",
                type=ActivityType.GUEST_ADDED,
                guest_name=guest.full_name,
                group_name=guest.group_name,
                timestamp=guest.created_at,
                description=f"Added {guest.full_name}{group_suffix}",
            )
        )

    recent_confirmed = _newest_first(
        (g for g in guests if g.rsvp_status == GuestStatus.CONFIRMED),
        key=lambda g: g.created_at,
    )[:MAX_RECENT_CONFIRMATIONS]
    for guest in recent_confirmed:
        activities.append(
            RecentActivityDTO(
                id=f"rsvp-confirmed-{guest.id}",
                type=ActivityType.RSVP_CONFIRMED,
                guest_name=guest.full_name,
                group_name=guest.group_name,
                timestamp=guest.created_at,
                description=f"{guest.full_name} confirmed attendance",
            )
        )

    recent_groups = _newest_first(
        (g for g in groups if g.created_at > window_start), key=lambda g: g.created_at
    )[:MAX_RECENT_GROUPS]
    for group in recent_groups:
        size = len(group.guests)
        activities.append(
            RecentActivityDTO(
                id=f"group-{group.id}",
                type=ActivityType.GROUP_CREATED,
                group_name=group.name,
                timestamp=group.created_at,
                description=f'Created group "{group.name}" with {size} guest{"" if size == 1 else "s"}',
            )
        )

    return _newest_first(activities, key=lambda a: a.timestamp)[:MAX_ACTIVITY_ENTRIES]


def calculate_group_stats(groups: list[GroupWithGuestsDTO]) -> GroupStatsDTO:
    groups_with_qr = sum(1 for g in groups if g.qr_code_generated)

    total_guests_in_groups = 0
    largest_group = LargestGroupDTO(name="None", size=0)
    fully_confirmed = 0
    fully_declined = 0
    partial = 0

    for group in groups:
        size = len(group.guests)
        total_guests_in_groups += size

        if size > largest_group.size:
            largest_group = LargestGroupDTO(name=group.name, size=size)

        confirmed = count_status(group.guests, GuestStatus.CONFIRMED)
        declined = count_status(group.guests, GuestStatus.DECLINED)

        # Groups where nobody has answered yet land in no bucket
        if confirmed == size:
            fully_confirmed += 1
        elif declined == size:
            fully_declined += 1
        elif confirmed + declined > 0:
            partial += 1

    return GroupStatsDTO(
        total_groups=len(groups),
        groups_with_qr=groups_with_qr,
        groups_without_qr=len(groups) - groups_with_qr,
        average_group_size=rounded_ratio(total_guests_in_groups, len(groups)),
        largest_group=largest_group,
        fully_confirmed_groups=fully_confirmed,
        fully_declined_groups=fully_declined,
        partial_response_groups=partial,
    )


def calculate_country_stats(groups: list[GroupWithGuestsDTO]) -> CountryStatsDTO:
    """
    Attribute every group member to the country of the group's address.

    Country strings are used as stored: "USA" and "usa" are separate buckets.
    """
    counts: dict[str, dict[str, int]] = {}
    for group in groups:
        if not group.address or not group.address.country:
            continue

        bucket = counts.setdefault(
            group.address.country,
            {"guest_count": 0, "confirmed_count": 0, "pending_count": 0, "declined_count": 0},
        )
        for guest in group.guests:
            bucket["guest_count"] += 1
            if guest.rsvp_status == GuestStatus.CONFIRMED:
                bucket["confirmed_count"] += 1
            elif guest.rsvp_status == GuestStatus.PENDING:
                bucket["pending_count"] += 1
            elif guest.rsvp_status == GuestStatus.DECLINED:
                bucket["declined_count"] += 1

    top_countries = sorted(
        (CountryBreakdownDTO(country=country, **bucket) for country, bucket in counts.items()),
        key=lambda c: c.guest_count,
        reverse=True,
    )[:TOP_COUNTRIES]

    return CountryStatsDTO(total_countries=len(counts), top_countries=top_countries)


def calculate_quick_numbers(
    attendance: AttendanceSummaryDTO, demographics: DemographicsDTO
) -> QuickNumbersDTO:
    return QuickNumbersDTO(
        total_attending=attendance.confirmed,
        total_pending=attendance.pending,
        total_declined=attendance.declined,
        needs_response=attendance.pending,
        adults_attending=demographics.adults.confirmed,
        children_attending=demographics.children.confirmed,
    )


def build_dashboard_stats(
    guests: list[GuestDTO],
    groups: list[GroupWithGuestsDTO],
    inviter_stats: dict[str, InviterBreakdownDTO] | None = None,
    now: datetime | None = None,
) -> DashboardStatsDTO:
    """Assemble the full statistics bundle from one snapshot.

    inviter_stats is computed by the caller since it needs the couples, which
    come from a separate fetch that is allowed to fail.
    """
    now = now or datetime.now(UTC)
    attendance = calculate_attendance_summary(guests)
    demographics = calculate_demographics(guests)

    return DashboardStatsDTO(
        attendance=attendance,
        rsvp_progress=calculate_rsvp_progress(guests),
        demographics=demographics,
        inviter_stats=inviter_stats or {},
        recent_activity=generate_recent_activity(guests, groups, now),
        group_stats=calculate_group_stats(groups),
        country_stats=calculate_country_stats(groups),
        quick_numbers=calculate_quick_numbers(attendance, demographics),
    )


def calculate_attendance_over_time(
    guests: list[GuestDTO],
    now: datetime | None = None,
    days: int = ATTENDANCE_HISTORY_DAYS,
) -> list[DailyAttendanceDTO]:
    """Confirmed/declined counts per day guests were added, oldest day first."""
    today = (now or datetime.now(UTC)).astimezone(UTC).date()

    per_day: dict[str, list[GuestDTO]] = {}
    for guest in guests:
        per_day.setdefault(guest.created_at.astimezone(UTC).date().isoformat(), []).append(guest)

    history = []
    for offset in range(days - 1, -1, -1):
        date = (today - timedelta(days=offset)).isoformat()
        added = per_day.get(date, [])
        history.append(
            DailyAttendanceDTO(
                date=date,
                confirmed=count_status(added, GuestStatus.CONFIRMED),
                declined=count_status(added, GuestStatus.DECLINED),
            )
        )
    return history
