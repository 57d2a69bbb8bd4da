from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from src.guests.dtos import (
    GroupNotFoundError,
    GuestNotInGroupError,
    GuestStatus,
    InvalidInvitationTokenError,
)
from src.guests.repository.write_models import RSVPWriteModel, SqlRSVPWriteModel
from src.guests.urls import UPDATE_RSVP_URL
from src.invitations.tokens import decode_invitation_token

router = APIRouter()


class RSVPResponseSubmit(BaseModel):
    """Submit one response per group member, keyed by guest id."""

    responses: dict[UUID, Literal["confirmed", "declined"]] = {}


class RSVPResponse(BaseModel):
    message: str
    confirmed: int
    declined: int
    pending: int


def get_rsvp_write_model() -> RSVPWriteModel:
    """Dependency to get RSVP write model instance."""
    return SqlRSVPWriteModel()


@router.post(UPDATE_RSVP_URL, response_model=RSVPResponse)
async def submit_rsvp(
    token: str,
    rsvp_data: RSVPResponseSubmit,
    write_model: RSVPWriteModel = Depends(get_rsvp_write_model),
) -> RSVPResponse:
    """
    Submit the RSVP for an invited group.
    Members without a response are reset to pending.
    """
    try:
        group_id = decode_invitation_token(token)
    except InvalidInvitationTokenError:
        raise HTTPException(status_code=404, detail="Invalid or expired RSVP link")

    try:
        response_dto = await write_model.submit_group_rsvp(
            group_id=group_id,
            responses={
                guest_id: GuestStatus(status) for guest_id, status in rsvp_data.responses.items()
            },
        )
    except GroupNotFoundError:
        raise HTTPException(status_code=404, detail="Invalid or expired RSVP link")
    except GuestNotInGroupError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return RSVPResponse(
        message=response_dto.message,
        confirmed=response_dto.confirmed,
        declined=response_dto.declined,
        pending=response_dto.pending,
    )
