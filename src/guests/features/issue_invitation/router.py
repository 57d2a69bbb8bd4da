from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from src.guests.dtos import GroupNotFoundError
from src.guests.features.issue_invitation.write_model import (
    InvitationWriteModel,
    SqlInvitationWriteModel,
)
from src.guests.urls import ISSUE_INVITATION_URL
from src.invitations.qr import png_data_url

router = APIRouter()


class InvitationResponse(BaseModel):
    group_id: UUID
    rsvp_url: str
    qr_code_data_url: str


def get_invitation_write_model() -> InvitationWriteModel:
    """Dependency to get invitation write model instance."""
    return SqlInvitationWriteModel()


@router.post(ISSUE_INVITATION_URL, response_model=InvitationResponse)
async def issue_invitation(
    group_id: UUID,
    write_model: InvitationWriteModel = Depends(get_invitation_write_model),
) -> InvitationResponse:
    """
    Issue (or reissue) a group's invitation.
    Returns the RSVP link and a QR code encoding it.
    """
    try:
        invitation = await write_model.issue_invitation(group_id)
    except GroupNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return InvitationResponse(
        group_id=invitation.group_id,
        rsvp_url=invitation.rsvp_url,
        qr_code_data_url=png_data_url(invitation.qr_code_png),
    )
