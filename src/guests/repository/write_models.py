"""RSVP write models - return DTOs, never ORM models."""

import logging
from abc import ABC, abstractmethod
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.guests.dtos import (
    GroupNotFoundError,
    GuestNotInGroupError,
    GuestStatus,
    RSVPResponseDTO,
)
from src.guests.repository.orm_models import Group, Guest

logger = logging.getLogger(__name__)


def build_rsvp_message(confirmed: int, declined: int) -> str:
    if confirmed and not declined:
        return "Thank you for confirming your attendance!"
    if declined and not confirmed:
        return "We're sorry you can't make it. Your response has been recorded."
    if confirmed or declined:
        return "Thank you! Your responses have been recorded."
    return "No responses were submitted."


class RSVPWriteModel(ABC):
    @abstractmethod
    async def submit_group_rsvp(
        self,
        group_id: UUID,
        responses: dict[UUID, GuestStatus],
    ) -> RSVPResponseDTO:
        """
        Record the RSVP of every member of a group.
        Members without a response go back to pending.
        """
        raise NotImplementedError


class SqlRSVPWriteModel(RSVPWriteModel):
    """Write operations for RSVP. Returns DTOs, never ORM models."""

    def __init__(self, session_overwrite: AsyncSession | None = None):
        self._session_overwrite = session_overwrite

    async def submit_group_rsvp(
        self,
        group_id: UUID,
        responses: dict[UUID, GuestStatus],
    ) -> RSVPResponseDTO:
        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            group = (
                await session.execute(select(Group).where(Group.uuid == group_id))
            ).scalar_one_or_none()
            if not group:
                raise GroupNotFoundError(group_id)

            members = (
                await session.execute(select(Guest).where(Guest.group_id == group_id))
            ).scalars().all()

            member_ids = {member.uuid for member in members}
            for guest_id in responses:
                if guest_id not in member_ids:
                    raise GuestNotInGroupError(guest_id)

            for member in members:
                member.rsvp_status = responses.get(member.uuid, GuestStatus.PENDING)

            await session.flush()

        confirmed = sum(1 for m in members if m.rsvp_status == GuestStatus.CONFIRMED)
        declined = sum(1 for m in members if m.rsvp_status == GuestStatus.DECLINED)
        pending = len(members) - confirmed - declined
        logger.info(
            "RSVP recorded for group %s: %d confirmed, %d declined, %d pending",
            group_id,
            confirmed,
            declined,
            pending,
        )

        return RSVPResponseDTO(
            message=build_rsvp_message(confirmed, declined),
            confirmed=confirmed,
            declined=declined,
            pending=pending,
        )
