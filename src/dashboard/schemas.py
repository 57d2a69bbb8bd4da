from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.dashboard.dtos import ActivityType


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AttendanceSummaryResponse(CamelModel):
    total_invited: int
    confirmed: int
    declined: int
    pending: int
    response_rate: int
    confirmed_rate: int
    declined_rate: int


class RsvpProgressResponse(CamelModel):
    total_responses: int
    total_invited: int
    response_rate: int
    pending_responses: int
    completed_responses: int
    progress_percentage: int


class StatusBreakdownResponse(CamelModel):
    total: int
    confirmed: int
    pending: int
    declined: int


class DemographicsResponse(CamelModel):
    adults: StatusBreakdownResponse
    children: StatusBreakdownResponse
    total_attending: int
    total_declined: int
    total_pending: int


class InviterBreakdownResponse(CamelModel):
    total: int
    confirmed: int
    pending: int
    declined: int
    response_rate: int


class RecentActivityResponse(CamelModel):
    id: str
    type: ActivityType
    guest_name: str | None = None
    group_name: str | None = None
    timestamp: datetime
    description: str


class LargestGroupResponse(CamelModel):
    name: str
    size: int


class GroupStatsResponse(CamelModel):
    total_groups: int
    groups_with_qr: int
    groups_without_qr: int
    average_group_size: int
    largest_group: LargestGroupResponse
    fully_confirmed_groups: int
    fully_declined_groups: int
    partial_response_groups: int


class CountryBreakdownResponse(CamelModel):
    country: str
    guest_count: int
    confirmed_count: int
    pending_count: int
    declined_count: int


class CountryStatsResponse(CamelModel):
    total_countries: int
    top_countries: list[CountryBreakdownResponse]


class QuickNumbersResponse(CamelModel):
    total_attending: int
    total_pending: int
    total_declined: int
    needs_response: int
    adults_attending: int
    children_attending: int


class DashboardStatsResponse(CamelModel):
    attendance: AttendanceSummaryResponse
    rsvp_progress: RsvpProgressResponse
    demographics: DemographicsResponse
    # keyed by couple full name, so the keys are left untouched
    inviter_stats: dict[str, InviterBreakdownResponse]
    recent_activity: list[RecentActivityResponse]
    group_stats: GroupStatsResponse
    country_stats: CountryStatsResponse
    quick_numbers: QuickNumbersResponse


class DailyAttendanceResponse(CamelModel):
    date: str
    confirmed: int
    declined: int
