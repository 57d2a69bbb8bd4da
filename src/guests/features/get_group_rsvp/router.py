from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from src.guests.dtos import AgeCategory, GuestStatus, InvalidInvitationTokenError
from src.guests.repository.read_models import GuestReadModel, SqlGuestReadModel
from src.guests.urls import GET_GROUP_RSVP_URL
from src.invitations.tokens import decode_invitation_token

router = APIRouter()


class GroupMemberResponse(BaseModel):
    """Response for a member of the invited group."""

    id: UUID
    first_name: str
    last_name: str
    age_category: AgeCategory
    rsvp_status: GuestStatus


class GroupRSVPResponse(BaseModel):
    """Response for the public RSVP page - token removed as it's in the URL."""

    group_id: UUID
    group_name: str
    guests: list[GroupMemberResponse]
    responded: int
    total: int


def get_guest_read_model() -> GuestReadModel:
    """Dependency to get guest read model instance."""
    return SqlGuestReadModel()


@router.get(GET_GROUP_RSVP_URL, response_model=GroupRSVPResponse)
async def get_group_rsvp(
    token: str,
    read_model: GuestReadModel = Depends(get_guest_read_model),
) -> GroupRSVPResponse:
    """
    Get RSVP page information by invitation token.
    Returns the invited group and its members for rendering the RSVP form.
    """
    try:
        group_id = decode_invitation_token(token)
    except InvalidInvitationTokenError:
        raise HTTPException(status_code=404, detail="Invalid or expired RSVP link")

    group = await read_model.get_group_with_guests(group_id)
    if not group:
        raise HTTPException(status_code=404, detail="Invalid or expired RSVP link")

    return GroupRSVPResponse(
        group_id=group.id,
        group_name=group.name,
        guests=[
            GroupMemberResponse(
                id=guest.id,
                first_name=guest.first_name,
                last_name=guest.last_name,
                age_category=guest.age_category,
                rsvp_status=guest.rsvp_status,
            )
            for guest in group.guests
        ],
        responded=group.confirmed_count + group.declined_count,
        total=group.guest_count,
    )
