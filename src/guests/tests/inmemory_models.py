"""In-memory read/write models and DTO builders for testing."""

from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

from src.guests.dtos import (
    AddressDTO,
    AgeCategory,
    CoupleDTO,
    GroupNotFoundError,
    GroupWithGuestsDTO,
    GuestDTO,
    GuestNotInGroupError,
    GuestStatus,
    RSVPResponseDTO,
)
from src.guests.repository.read_models import CoupleReadModel, GuestReadModel
from src.guests.repository.write_models import RSVPWriteModel, build_rsvp_message

NOW = datetime(2026, 6, 1, 12, 0, tzinfo=UTC)


def create_test_guest(
    first_name: str = "John",
    last_name: str = "Doe",
    rsvp_status: GuestStatus = GuestStatus.PENDING,
    age_category: AgeCategory = AgeCategory.ADULT,
    created_at: datetime = NOW,
    group: GroupWithGuestsDTO | None = None,
    group_id: UUID | None = None,
    group_name: str | None = None,
    invited_by: UUID | None = None,
    guest_id: UUID | None = None,
) -> GuestDTO:
    return GuestDTO(
        id=guest_id or uuid4(),
        first_name=first_name,
        last_name=last_name,
        age_category=age_category,
        rsvp_status=rsvp_status,
        created_at=created_at,
        group_id=group.id if group else group_id,
        group_name=group.name if group else group_name,
        invited_by=invited_by,
    )


def create_test_address(country: str = "Netherlands") -> AddressDTO:
    return AddressDTO(
        id=uuid4(),
        street_address="Keizersgracht 1",
        city="Amsterdam",
        postal_code="1015 CJ",
        country=country,
        created_at=NOW,
    )


def create_test_group(
    name: str = "The Does",
    guests: list[GuestDTO] | None = None,
    country: str | None = None,
    qr_code_generated: bool = False,
    created_at: datetime = NOW,
    group_id: UUID | None = None,
) -> GroupWithGuestsDTO:
    """Build a group; members are re-pointed at the group and its derived counts filled in."""
    group_id = group_id or uuid4()
    members = [
        replace(guest, group_id=group_id, group_name=name) for guest in guests or []
    ]
    return GroupWithGuestsDTO(
        id=group_id,
        name=name,
        created_at=created_at,
        qr_code_generated=qr_code_generated,
        qr_code_url="http://localhost:5173/rsvp/token" if qr_code_generated else None,
        address=create_test_address(country) if country is not None else None,
        guest_count=len(members),
        confirmed_count=sum(1 for g in members if g.rsvp_status == GuestStatus.CONFIRMED),
        pending_count=sum(1 for g in members if g.rsvp_status == GuestStatus.PENDING),
        declined_count=sum(1 for g in members if g.rsvp_status == GuestStatus.DECLINED),
        guests=members,
    )


def create_test_couple(
    first_name: str = "Gemma",
    last_name: str = "Jansen",
    created_at: datetime = NOW,
) -> CoupleDTO:
    return CoupleDTO(id=uuid4(), first_name=first_name, last_name=last_name, created_at=created_at)


class InMemoryGuestReadModel(GuestReadModel):
    """In-memory guest read model for testing."""

    def __init__(
        self,
        guests: list[GuestDTO] | None = None,
        groups: list[GroupWithGuestsDTO] | None = None,
    ):
        self._groups = list(groups or [])
        self._guests = list(guests) if guests is not None else [
            guest for group in self._groups for guest in group.guests
        ]
        self.calls: list[str] = []

    async def get_all_guests(self) -> list[GuestDTO]:
        self.calls.append("get_all_guests")
        return list(self._guests)

    async def get_groups_with_guests(self) -> list[GroupWithGuestsDTO]:
        self.calls.append("get_groups_with_guests")
        return list(self._groups)

    async def get_group_with_guests(self, group_id: UUID) -> GroupWithGuestsDTO | None:
        for group in self._groups:
            if group.id == group_id:
                return group
        return None


class InMemoryCoupleReadModel(CoupleReadModel):
    """In-memory couple read model for testing."""

    def __init__(self, couples: list[CoupleDTO] | None = None):
        self._couples = list(couples or [])

    async def get_all_couples(self) -> list[CoupleDTO]:
        return list(self._couples)


class FailingCoupleReadModel(CoupleReadModel):
    """Couple read model whose store is unreachable."""

    async def get_all_couples(self) -> list[CoupleDTO]:
        raise ConnectionError("couples store unavailable")


class InMemoryRSVPWriteModel(RSVPWriteModel):
    """In-memory RSVP write model for testing."""

    def __init__(self, groups: list[GroupWithGuestsDTO]):
        self._members = {group.id: [guest.id for guest in group.guests] for group in groups}
        self.statuses: dict[UUID, GuestStatus] = {}

    async def submit_group_rsvp(
        self,
        group_id: UUID,
        responses: dict[UUID, GuestStatus],
    ) -> RSVPResponseDTO:
        if group_id not in self._members:
            raise GroupNotFoundError(group_id)
        members = self._members[group_id]
        for guest_id in responses:
            if guest_id not in members:
                raise GuestNotInGroupError(guest_id)

        for guest_id in members:
            self.statuses[guest_id] = responses.get(guest_id, GuestStatus.PENDING)

        statuses = [self.statuses[guest_id] for guest_id in members]
        confirmed = statuses.count(GuestStatus.CONFIRMED)
        declined = statuses.count(GuestStatus.DECLINED)
        return RSVPResponseDTO(
            message=build_rsvp_message(confirmed, declined),
            confirmed=confirmed,
            declined=declined,
            pending=len(members) - confirmed - declined,
        )
