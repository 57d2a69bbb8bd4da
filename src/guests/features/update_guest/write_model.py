"""Write model for editing a guest's details, status, group or inviter."""

import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.guests.dtos import AgeCategory, GuestDTO, GuestStatus
from src.guests.repository.lookups import (
    get_couple_or_raise,
    get_group_or_raise,
    get_guest_or_raise,
    load_guest_dto,
)

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset(
    {
        "first_name",
        "last_name",
        "email",
        "phone",
        "age_category",
        "rsvp_status",
        "group_id",
        "invited_by",
        "notes",
    }
)


class GuestUpdateWriteModel(ABC):
    @abstractmethod
    async def update_guest(self, guest_id: UUID, **changes) -> GuestDTO:
        """
        Apply the given field changes to a guest; omitted fields keep their value.
        Raises GuestNotFoundError, GroupNotFoundError or CoupleNotFoundError, and
        ValueError for fields that cannot be changed.
        """
        raise NotImplementedError


class SqlGuestUpdateWriteModel(GuestUpdateWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def update_guest(self, guest_id: UUID, **changes) -> GuestDTO:
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update guest fields: {', '.join(sorted(unknown))}")

        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            guest = await get_guest_or_raise(session, guest_id)

            if changes.get("group_id"):
                await get_group_or_raise(session, changes["group_id"])
            if changes.get("invited_by"):
                await get_couple_or_raise(session, changes["invited_by"])
            if "age_category" in changes:
                changes["age_category"] = AgeCategory(changes["age_category"])
            if "rsvp_status" in changes:
                changes["rsvp_status"] = GuestStatus(changes["rsvp_status"])

            for field_name, value in changes.items():
                setattr(guest, field_name, value)
            await session.flush()

            logger.info("Updated guest %s: %s", guest_id, ", ".join(sorted(changes)))
            return await load_guest_dto(session, guest)
