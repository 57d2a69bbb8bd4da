"""Map ORM rows to DTOs.

Timestamps coming back from the database are normalised to timezone-aware UTC
(SQLite hands them back naive).
"""

from datetime import UTC, datetime
from uuid import UUID

from src.guests.dtos import (
    AddressDTO,
    AgeCategory,
    CoupleDTO,
    GroupWithGuestsDTO,
    GuestDTO,
    GuestStatus,
)
from src.guests.repository.orm_models import Address, Couple, Group, Guest


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def address_to_dto(address: Address) -> AddressDTO:
    return AddressDTO(
        id=address.uuid,
        house_number=address.house_number,
        street_address=address.street_address,
        city=address.city,
        state_province=address.state_province,
        postal_code=address.postal_code,
        country=address.country,
        delivery_instructions=address.delivery_instructions,
        created_at=as_utc(address.created_at),
    )


def couple_to_dto(couple: Couple) -> CoupleDTO:
    return CoupleDTO(
        id=couple.uuid,
        first_name=couple.first_name,
        last_name=couple.last_name,
        email=couple.email,
        auth_user_id=couple.auth_user_id,
        created_at=as_utc(couple.created_at),
    )


def guest_to_dto(
    guest: Guest,
    group_name: str | None = None,
    invited_by_name: str | None = None,
) -> GuestDTO:
    return GuestDTO(
        id=guest.uuid,
        first_name=guest.first_name,
        last_name=guest.last_name,
        email=guest.email,
        phone=guest.phone,
        age_category=AgeCategory(guest.age_category),
        rsvp_status=GuestStatus(guest.rsvp_status),
        group_id=guest.group_id,
        group_name=group_name,
        invited_by=guest.invited_by,
        invited_by_name=invited_by_name,
        notes=guest.notes,
        created_at=as_utc(guest.created_at),
    )


def _status_counts(guests: list[GuestDTO]) -> dict[str, int]:
    return {
        "guest_count": len(guests),
        "confirmed_count": sum(1 for g in guests if g.rsvp_status == GuestStatus.CONFIRMED),
        "pending_count": sum(1 for g in guests if g.rsvp_status == GuestStatus.PENDING),
        "declined_count": sum(1 for g in guests if g.rsvp_status == GuestStatus.DECLINED),
    }


def group_with_guests_to_dto(
    group: Group,
    members: list[GuestDTO],
    address: AddressDTO | None = None,
) -> GroupWithGuestsDTO:
    return GroupWithGuestsDTO(
        id=group.uuid,
        name=group.name,
        address_id=group.address_id,
        address=address,
        qr_code_generated=bool(group.qr_code_generated),
        qr_code_url=group.qr_code_url,
        created_at=as_utc(group.created_at),
        guests=list(members),
        **_status_counts(members),
    )


def couple_name_map(couples: list[Couple]) -> dict[UUID, str]:
    return {couple.uuid: f"{couple.first_name} {couple.last_name}" for couple in couples}
