from fastapi import APIRouter

from .features.get_group_rsvp.router import router as get_group_rsvp_router
from .features.issue_invitation.router import router as issue_invitation_router
from .features.update_rsvp.router import router as update_rsvp_router

router = APIRouter()

router.include_router(get_group_rsvp_router)
router.include_router(issue_invitation_router)
router.include_router(update_rsvp_router)
