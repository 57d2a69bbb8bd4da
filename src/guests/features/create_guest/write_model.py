"""Write model for adding guests to the guest list.

A guest may be placed in a group and attributed to the couple who invited them;
both references must exist.
"""

import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.guests.dtos import AgeCategory, GuestDTO
from src.guests.repository.lookups import get_couple_or_raise, get_group_or_raise
from src.guests.repository.mappers import guest_to_dto
from src.guests.repository.orm_models import Guest

logger = logging.getLogger(__name__)


class GuestCreateWriteModel(ABC):
    @abstractmethod
    async def create_guest(
        self,
        first_name: str,
        last_name: str,
        age_category: AgeCategory = AgeCategory.ADULT,
        email: str | None = None,
        phone: str | None = None,
        group_id: UUID | None = None,
        invited_by: UUID | None = None,
        notes: str | None = None,
    ) -> GuestDTO:
        """Create a pending guest. Raises GroupNotFoundError or CoupleNotFoundError."""
        raise NotImplementedError


class SqlGuestCreateWriteModel(GuestCreateWriteModel):
    """SQL implementation of guest creation."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_guest(
        self,
        first_name: str,
        last_name: str,
        age_category: AgeCategory = AgeCategory.ADULT,
        email: str | None = None,
        phone: str | None = None,
        group_id: UUID | None = None,
        invited_by: UUID | None = None,
        notes: str | None = None,
    ) -> GuestDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            group = await get_group_or_raise(session, group_id) if group_id else None
            couple = await get_couple_or_raise(session, invited_by) if invited_by else None

            guest = Guest(
                first_name=first_name,
                last_name=last_name,
                age_category=age_category,
                email=email,
                phone=phone,
                group_id=group_id,
                invited_by=invited_by,
                notes=notes,
            )
            session.add(guest)
            await session.flush()

            logger.info("Added guest %s %s (%s)", first_name, last_name, guest.uuid)
            return guest_to_dto(
                guest,
                group_name=group.name if group else None,
                invited_by_name=f"{couple.first_name} {couple.last_name}" if couple else None,
            )
