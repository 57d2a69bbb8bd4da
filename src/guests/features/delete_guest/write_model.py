"""Write model for removing a guest from the list.

Removing the last member of a group removes the group and its address too.
"""

import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.guests.repository.lookups import get_group_members, get_guest_or_raise
from src.guests.repository.orm_models import Address, Group

logger = logging.getLogger(__name__)


class GuestDeleteWriteModel(ABC):
    @abstractmethod
    async def delete_guest(self, guest_id: UUID) -> bool:
        """Delete a guest. Returns True when their group was emptied and deleted."""
        raise NotImplementedError


class SqlGuestDeleteWriteModel(GuestDeleteWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def delete_guest(self, guest_id: UUID) -> bool:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            guest = await get_guest_or_raise(session, guest_id)
            group_id = guest.group_id

            await session.delete(guest)
            await session.flush()
            logger.info("Deleted guest %s", guest_id)

            if not group_id or await get_group_members(session, group_id):
                return False

            group = await session.get(Group, group_id)
            if not group:
                return False
            address_id = group.address_id
            await session.delete(group)
            await session.flush()
            if address_id:
                address = await session.get(Address, address_id)
                if address:
                    await session.delete(address)
                    await session.flush()

            logger.info("Deleted empty group %s", group_id)
            return True
