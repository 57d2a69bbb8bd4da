"""DTOs making up the dashboard statistics bundle."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class ActivityType(str, Enum):
    GUEST_ADDED = "guest_added"
    RSVP_CONFIRMED = "rsvp_confirmed"
    RSVP_DECLINED = "rsvp_declined"
    GROUP_CREATED = "group_created"


@dataclass(frozen=True)
class AttendanceSummaryDTO:
    total_invited: int
    confirmed: int
    declined: int
    pending: int
    response_rate: int
    confirmed_rate: int
    declined_rate: int


@dataclass(frozen=True)
class RsvpProgressDTO:
    total_responses: int
    total_invited: int
    response_rate: int
    pending_responses: int
    completed_responses: int
    progress_percentage: int


@dataclass(frozen=True)
class StatusBreakdownDTO:
    total: int
    confirmed: int
    pending: int
    declined: int


@dataclass(frozen=True)
class DemographicsDTO:
    adults: StatusBreakdownDTO
    children: StatusBreakdownDTO
    total_attending: int
    total_declined: int
    total_pending: int


@dataclass(frozen=True)
class InviterBreakdownDTO:
    total: int
    confirmed: int
    pending: int
    declined: int
    response_rate: int


@dataclass(frozen=True)
class RecentActivityDTO:
    id: str
    type: ActivityType
    timestamp: datetime
    description: str
    guest_name: str | None = None
    group_name: str | None = None


@dataclass(frozen=True)
class LargestGroupDTO:
    name: str
    size: int


@dataclass(frozen=True)
class GroupStatsDTO:
    total_groups: int
    groups_with_qr: int
    groups_without_qr: int
    average_group_size: int
    largest_group: LargestGroupDTO
    fully_confirmed_groups: int
    fully_declined_groups: int
    partial_response_groups: int


@dataclass(frozen=True)
class CountryBreakdownDTO:
    country: str
    guest_count: int
    confirmed_count: int
    pending_count: int
    declined_count: int


@dataclass(frozen=True)
class CountryStatsDTO:
    total_countries: int
    top_countries: list[CountryBreakdownDTO] = field(default_factory=list)


@dataclass(frozen=True)
class QuickNumbersDTO:
    total_attending: int
    total_pending: int
    total_declined: int
    needs_response: int
    adults_attending: int
    children_attending: int


@dataclass(frozen=True)
class DashboardStatsDTO:
    attendance: AttendanceSummaryDTO
    rsvp_progress: RsvpProgressDTO
    demographics: DemographicsDTO
    inviter_stats: dict[str, InviterBreakdownDTO]
    recent_activity: list[RecentActivityDTO]
    group_stats: GroupStatsDTO
    country_stats: CountryStatsDTO
    quick_numbers: QuickNumbersDTO


@dataclass(frozen=True)
class DailyAttendanceDTO:
    date: str
    confirmed: int
    declined: int
