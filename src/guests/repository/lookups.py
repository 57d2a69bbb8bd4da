"""Row lookups shared by the guest and group write models."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.guests.dtos import (
    CoupleNotFoundError,
    GroupNotFoundError,
    GroupWithGuestsDTO,
    GuestDTO,
    GuestNotFoundError,
)
from src.guests.repository.mappers import (
    address_to_dto,
    group_with_guests_to_dto,
    guest_to_dto,
)
from src.guests.repository.orm_models import Address, Couple, Group, Guest


async def get_group_or_raise(session: AsyncSession, group_id: UUID) -> Group:
    group = (await session.execute(select(Group).where(Group.uuid == group_id))).scalar_one_or_none()
    if not group:
        raise GroupNotFoundError(group_id)
    return group


async def get_guest_or_raise(session: AsyncSession, guest_id: UUID) -> Guest:
    guest = (await session.execute(select(Guest).where(Guest.uuid == guest_id))).scalar_one_or_none()
    if not guest:
        raise GuestNotFoundError(guest_id)
    return guest


async def get_couple_or_raise(session: AsyncSession, couple_id: UUID) -> Couple:
    couple = (
        await session.execute(select(Couple).where(Couple.uuid == couple_id))
    ).scalar_one_or_none()
    if not couple:
        raise CoupleNotFoundError(couple_id)
    return couple


async def get_group_members(session: AsyncSession, group_id: UUID) -> list[Guest]:
    result = await session.execute(
        select(Guest).where(Guest.group_id == group_id).order_by(Guest.created_at)
    )
    return list(result.scalars().all())


async def load_guest_dto(session: AsyncSession, guest: Guest) -> GuestDTO:
    group_name = None
    if guest.group_id:
        group = await session.get(Group, guest.group_id)
        group_name = group.name if group else None
    invited_by_name = None
    if guest.invited_by:
        couple = await session.get(Couple, guest.invited_by)
        invited_by_name = f"{couple.first_name} {couple.last_name}" if couple else None
    return guest_to_dto(guest, group_name=group_name, invited_by_name=invited_by_name)


async def load_group_dto(session: AsyncSession, group: Group) -> GroupWithGuestsDTO:
    members = await get_group_members(session, group.uuid)
    address = await session.get(Address, group.address_id) if group.address_id else None
    return group_with_guests_to_dto(
        group,
        members=[guest_to_dto(guest, group_name=group.name) for guest in members],
        address=address_to_dto(address) if address else None,
    )
