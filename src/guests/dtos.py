from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID


class CoupleLimitReachedError(Exception):
    """Raised when trying to register more couples than a wedding allows."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Maximum of {limit} couples allowed per wedding")


class GroupNotFoundError(Exception):
    """Raised when a group id does not resolve to a stored group."""

    def __init__(self, group_id: UUID) -> None:
        self.group_id = group_id
        super().__init__(f"Group not found: {group_id}")


class GuestNotFoundError(Exception):
    """Raised when a guest id does not resolve to a stored guest."""

    def __init__(self, guest_id: UUID) -> None:
        self.guest_id = guest_id
        super().__init__(f"Guest not found: {guest_id}")


class CoupleNotFoundError(Exception):
    """Raised when an inviter id does not resolve to a stored couple."""

    def __init__(self, couple_id: UUID) -> None:
        self.couple_id = couple_id
        super().__init__(f"Couple not found: {couple_id}")


class InvalidInvitationTokenError(Exception):
    """Raised when an invitation token is malformed, tampered with or expired."""


class GuestNotInGroupError(ValueError):
    """Raised when an RSVP names a guest outside the invited group."""

    def __init__(self, guest_id: UUID) -> None:
        self.guest_id = guest_id
        super().__init__(f"Guest {guest_id} is not part of this invitation")


class GuestStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    DECLINED = "declined"


class AgeCategory(str, Enum):
    ADULT = "adult"
    CHILD = "child"


@dataclass(frozen=True)
class AddressDTO:
    """DTO for a postal address owned by a group."""

    id: UUID
    street_address: str
    city: str
    postal_code: str
    country: str
    created_at: datetime
    house_number: str | None = None
    state_province: str | None = None
    delivery_instructions: str | None = None


@dataclass(frozen=True)
class NewAddress:
    """Postal address as entered, before it is stored."""

    street_address: str
    city: str
    postal_code: str
    country: str
    house_number: str | None = None
    state_province: str | None = None
    delivery_instructions: str | None = None


@dataclass(frozen=True)
class CoupleDTO:
    """DTO for one of the wedding couple accounts."""

    id: UUID
    first_name: str
    last_name: str
    created_at: datetime
    email: str | None = None
    auth_user_id: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class GuestDTO:
    """DTO for guest data."""

    id: UUID
    first_name: str
    last_name: str
    age_category: AgeCategory
    rsvp_status: GuestStatus
    created_at: datetime
    email: str | None = None
    phone: str | None = None
    group_id: UUID | None = None
    group_name: str | None = None
    invited_by: UUID | None = None
    invited_by_name: str | None = None
    notes: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class GroupDTO:
    """DTO for a group (household) sharing one invitation.

    The member counts are derived from the guests whose group_id points at
    this group, partitioned by RSVP status.
    """

    id: UUID
    name: str
    created_at: datetime
    qr_code_generated: bool = False
    qr_code_url: str | None = None
    address_id: UUID | None = None
    address: AddressDTO | None = None
    guest_count: int = 0
    confirmed_count: int = 0
    pending_count: int = 0
    declined_count: int = 0


@dataclass(frozen=True)
class GroupWithGuestsDTO(GroupDTO):
    """Group DTO carrying its resolved member guests."""

    guests: list[GuestDTO] = field(default_factory=list)


@dataclass(frozen=True)
class InvitationDTO:
    """DTO for an issued group invitation."""

    group_id: UUID
    token: str
    rsvp_url: str
    qr_code_png: bytes


@dataclass(frozen=True)
class RSVPResponseDTO:
    """DTO for a submitted group RSVP."""

    message: str
    confirmed: int
    declined: int
    pending: int
