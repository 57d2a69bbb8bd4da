"""Seed rows straight into a test session."""

from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from src.guests.dtos import AgeCategory, GuestStatus
from src.guests.repository.orm_models import Address, Couple, Group, Guest
from src.guests.tests.inmemory_models import NOW


async def add_couple(session: AsyncSession, first_name: str, last_name: str) -> Couple:
    couple = Couple(first_name=first_name, last_name=last_name)
    session.add(couple)
    await session.flush()
    return couple


async def add_group(
    session: AsyncSession,
    name: str,
    country: str | None = None,
    created_at: datetime = NOW,
) -> Group:
    address = None
    if country:
        address = Address(
            street_address="Keizersgracht 1",
            city="Amsterdam",
            postal_code="1015 CJ",
            country=country,
        )
        session.add(address)
        await session.flush()

    group = Group(name=name, address_id=address.uuid if address else None, created_at=created_at)
    session.add(group)
    await session.flush()
    return group


async def add_guest(
    session: AsyncSession,
    first_name: str,
    last_name: str = "Bakker",
    group: Group | None = None,
    invited_by: Couple | None = None,
    rsvp_status: GuestStatus = GuestStatus.PENDING,
    age_category: AgeCategory = AgeCategory.ADULT,
    created_at: datetime = NOW,
) -> Guest:
    guest = Guest(
        first_name=first_name,
        last_name=last_name,
        group_id=group.uuid if group else None,
        invited_by=invited_by.uuid if invited_by else None,
        rsvp_status=rsvp_status,
        age_category=age_category,
        created_at=created_at,
    )
    session.add(guest)
    await session.flush()
    return guest
