"""Write model for issuing a group's RSVP invitation (signed link + QR code)."""

import logging
from abc import ABC, abstractmethod
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.guests.dtos import GroupNotFoundError, InvitationDTO
from src.guests.repository.orm_models import Group
from src.invitations.qr import render_qr_code_png
from src.invitations.tokens import build_rsvp_url, create_invitation_token

logger = logging.getLogger(__name__)


class InvitationWriteModel(ABC):
    @abstractmethod
    async def issue_invitation(self, group_id: UUID) -> InvitationDTO:
        """
        Issue (or reissue) the invitation for a group.
        Stores the RSVP URL on the group and marks its QR code as generated.
        """
        raise NotImplementedError


class SqlInvitationWriteModel(InvitationWriteModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def issue_invitation(self, group_id: UUID) -> InvitationDTO:
        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            group = (
                await session.execute(select(Group).where(Group.uuid == group_id))
            ).scalar_one_or_none()
            if not group:
                raise GroupNotFoundError(group_id)

            token = create_invitation_token(group.uuid)
            rsvp_url = build_rsvp_url(token)

            group.qr_code_generated = True
            group.qr_code_url = rsvp_url
            await session.flush()

        logger.info("Issued invitation for group %s", group_id)
        return InvitationDTO(
            group_id=group_id,
            token=token,
            rsvp_url=rsvp_url,
            qr_code_png=render_qr_code_png(rsvp_url),
        )
