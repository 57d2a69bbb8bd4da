"""Write model for renaming a group and editing or removing its address."""

import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.guests.dtos import GroupWithGuestsDTO, NewAddress
from src.guests.repository.lookups import get_group_or_raise, load_group_dto
from src.guests.repository.orm_models import Address

logger = logging.getLogger(__name__)

ADDRESS_FIELDS = (
    "house_number",
    "street_address",
    "city",
    "state_province",
    "postal_code",
    "country",
    "delivery_instructions",
)


class GroupUpdateWriteModel(ABC):
    @abstractmethod
    async def update_group(
        self,
        group_id: UUID,
        name: str | None = None,
        address: NewAddress | None = None,
    ) -> GroupWithGuestsDTO:
        """
        Rename a group and/or set its address. An existing address is edited in
        place; a group without one gets a new address.
        """
        raise NotImplementedError

    @abstractmethod
    async def remove_address(self, group_id: UUID) -> GroupWithGuestsDTO:
        """Delete the group's address, if it has one."""
        raise NotImplementedError


class SqlGroupUpdateWriteModel(GroupUpdateWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def update_group(
        self,
        group_id: UUID,
        name: str | None = None,
        address: NewAddress | None = None,
    ) -> GroupWithGuestsDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            group = await get_group_or_raise(session, group_id)

            if name is not None:
                group.name = name

            if address:
                address_row = (
                    await session.get(Address, group.address_id) if group.address_id else None
                )
                if address_row is None:
                    address_row = Address()
                    session.add(address_row)
                for field_name in ADDRESS_FIELDS:
                    setattr(address_row, field_name, getattr(address, field_name))
                await session.flush()
                group.address_id = address_row.uuid

            await session.flush()
            logger.info("Updated group %s", group_id)
            return await load_group_dto(session, group)

    async def remove_address(self, group_id: UUID) -> GroupWithGuestsDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            group = await get_group_or_raise(session, group_id)

            if group.address_id:
                address = await session.get(Address, group.address_id)
                group.address_id = None
                await session.flush()
                if address:
                    await session.delete(address)
                    await session.flush()
                logger.info("Removed address from group %s", group_id)

            return await load_group_dto(session, group)
