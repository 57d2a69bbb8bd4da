"""Write model for deleting a group.

Members are moved to another group when one is given, otherwise they become
ungrouped guests. The group's address is deleted with it.
"""

import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.guests.repository.lookups import get_group_members, get_group_or_raise
from src.guests.repository.orm_models import Address

logger = logging.getLogger(__name__)


class GroupDeleteWriteModel(ABC):
    @abstractmethod
    async def delete_group(self, group_id: UUID, reassign_to: UUID | None = None) -> int:
        """Delete a group and return how many members were moved out of it."""
        raise NotImplementedError


class SqlGroupDeleteWriteModel(GroupDeleteWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def delete_group(self, group_id: UUID, reassign_to: UUID | None = None) -> int:
        if reassign_to == group_id:
            raise ValueError("Cannot reassign guests to the group being deleted")

        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            group = await get_group_or_raise(session, group_id)
            if reassign_to:
                await get_group_or_raise(session, reassign_to)

            members = await get_group_members(session, group_id)
            for member in members:
                member.group_id = reassign_to
            await session.flush()

            address_id = group.address_id
            await session.delete(group)
            await session.flush()
            if address_id:
                address = await session.get(Address, address_id)
                if address:
                    await session.delete(address)
                    await session.flush()

            logger.info(
                "Deleted group %s, moved %d guest(s) to %s",
                group_id,
                len(members),
                reassign_to or "no group",
            )
            return len(members)
