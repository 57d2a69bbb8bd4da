import abc
import asyncio
import contextlib
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.guests.dtos import CoupleDTO, GroupWithGuestsDTO, GuestDTO
from src.guests.repository.mappers import (
    address_to_dto,
    couple_name_map,
    couple_to_dto,
    group_with_guests_to_dto,
    guest_to_dto,
)
from src.guests.repository.orm_models import Address, Couple, Group, Guest


class GuestReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_all_guests(self) -> list[GuestDTO]:
        """Get every guest, newest first, with group and inviter names resolved."""
        raise NotImplementedError

    @abc.abstractmethod
    async def get_groups_with_guests(self) -> list[GroupWithGuestsDTO]:
        """Get every group, newest first, with its members and address resolved."""
        raise NotImplementedError

    @abc.abstractmethod
    async def get_group_with_guests(self, group_id: UUID) -> GroupWithGuestsDTO | None:
        raise NotImplementedError


class CoupleReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_all_couples(self) -> list[CoupleDTO]:
        """Get every couple, most recently created first."""
        raise NotImplementedError


class _SqlReadModel:
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite
        self._session_lock = asyncio.Lock()

    @contextlib.asynccontextmanager
    async def _session(self):
        """Open a session, or take turns on the overridden one.

        An AsyncSession runs one operation at a time, so concurrent reads
        through a shared session are serialised.
        """
        if self._session_overwrite is None:
            async with async_session_manager() as session:
                yield session
        else:
            async with self._session_lock:
                yield self._session_overwrite


class SqlGuestReadModel(_SqlReadModel, GuestReadModel):
    """SQL implementation of guest read model."""

    async def get_all_guests(self) -> list[GuestDTO]:
        async with self._session() as session:
            guests = (
                await session.execute(select(Guest).order_by(Guest.created_at.desc()))
            ).scalars().all()
            groups = (await session.execute(select(Group))).scalars().all()
            couples = (await session.execute(select(Couple))).scalars().all()

        group_names = {group.uuid: group.name for group in groups}
        inviter_names = couple_name_map(couples)
        return [
            guest_to_dto(
                guest,
                group_name=group_names.get(guest.group_id),
                invited_by_name=inviter_names.get(guest.invited_by),
            )
            for guest in guests
        ]

    async def get_groups_with_guests(self) -> list[GroupWithGuestsDTO]:
        async with self._session() as session:
            groups = (
                await session.execute(select(Group).order_by(Group.created_at.desc()))
            ).scalars().all()
            guests = (
                await session.execute(
                    select(Guest).where(Guest.group_id.is_not(None)).order_by(Guest.created_at)
                )
            ).scalars().all()
            addresses = (await session.execute(select(Address))).scalars().all()
            couples = (await session.execute(select(Couple))).scalars().all()

        address_map = {address.uuid: address_to_dto(address) for address in addresses}
        inviter_names = couple_name_map(couples)

        members_by_group: dict[UUID, list[Guest]] = {}
        for guest in guests:
            members_by_group.setdefault(guest.group_id, []).append(guest)

        return [
            group_with_guests_to_dto(
                group,
                members=[
                    guest_to_dto(
                        guest,
                        group_name=group.name,
                        invited_by_name=inviter_names.get(guest.invited_by),
                    )
                    for guest in members_by_group.get(group.uuid, [])
                ],
                address=address_map.get(group.address_id),
            )
            for group in groups
        ]

    async def get_group_with_guests(self, group_id: UUID) -> GroupWithGuestsDTO | None:
        async with self._session() as session:
            group = (
                await session.execute(select(Group).where(Group.uuid == group_id))
            ).scalar_one_or_none()
            if not group:
                return None

            guests = (
                await session.execute(
                    select(Guest).where(Guest.group_id == group_id).order_by(Guest.created_at)
                )
            ).scalars().all()

            address = None
            if group.address_id:
                address = (
                    await session.execute(select(Address).where(Address.uuid == group.address_id))
                ).scalar_one_or_none()

        return group_with_guests_to_dto(
            group,
            members=[guest_to_dto(guest, group_name=group.name) for guest in guests],
            address=address_to_dto(address) if address else None,
        )


class SqlCoupleReadModel(_SqlReadModel, CoupleReadModel):
    """SQL implementation of couple read model."""

    async def get_all_couples(self) -> list[CoupleDTO]:
        async with self._session() as session:
            result = await session.execute(select(Couple).order_by(Couple.created_at.desc()))
            return [couple_to_dto(couple) for couple in result.scalars().all()]
