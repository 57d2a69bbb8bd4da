"""Write model for moving guests between groups."""

import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.guests.dtos import GuestDTO
from src.guests.repository.lookups import get_group_or_raise, get_guest_or_raise, load_guest_dto

logger = logging.getLogger(__name__)


class GuestMoveWriteModel(ABC):
    @abstractmethod
    async def assign_guests_to_group(
        self, guest_ids: list[UUID], group_id: UUID | None
    ) -> list[GuestDTO]:
        """
        Put every listed guest in the group, or ungroup them when group_id is None.
        Nothing is moved unless every guest and the group exist.
        """
        raise NotImplementedError

    async def move_guest_to_group(self, guest_id: UUID, group_id: UUID | None) -> GuestDTO:
        [guest] = await self.assign_guests_to_group([guest_id], group_id)
        return guest


class SqlGuestMoveWriteModel(GuestMoveWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def assign_guests_to_group(
        self, guest_ids: list[UUID], group_id: UUID | None
    ) -> list[GuestDTO]:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            if group_id:
                await get_group_or_raise(session, group_id)
            guests = [await get_guest_or_raise(session, guest_id) for guest_id in guest_ids]

            for guest in guests:
                guest.group_id = group_id
            await session.flush()

            logger.info("Moved %d guest(s) to %s", len(guests), group_id or "no group")
            return [await load_guest_dto(session, guest) for guest in guests]
