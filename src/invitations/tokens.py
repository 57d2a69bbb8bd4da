"""Signed, expiring invitation tokens for group RSVP links."""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt

from src.config.settings import settings
from src.guests.dtos import InvalidInvitationTokenError

TOKEN_TYPE = "rsvp-invitation"


def create_invitation_token(group_id: UUID, now: datetime | None = None) -> str:
    issued_at = now or datetime.now(UTC)
    payload = {
        "sub": str(group_id),
        "typ": TOKEN_TYPE,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.invitation_token_expire_days),
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_invitation_token(token: str) -> UUID:
    """Return the group id carried by the token.

    Raises InvalidInvitationTokenError when the signature, expiry or token type
    does not check out.
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except jwt.PyJWTError as e:
        raise InvalidInvitationTokenError(str(e)) from e

    if payload.get("typ") != TOKEN_TYPE:
        raise InvalidInvitationTokenError("Not an invitation token")
    try:
        return UUID(payload["sub"])
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidInvitationTokenError("Token carries no group id") from e


def build_rsvp_url(token: str) -> str:
    return f"{settings.frontend_url.rstrip('/')}/rsvp/{token}"
