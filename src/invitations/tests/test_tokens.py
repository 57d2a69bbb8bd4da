from datetime import UTC, datetime, timedelta
from uuid import uuid4

import jwt
import pytest

from src.config.settings import settings
from src.guests.dtos import InvalidInvitationTokenError
from src.invitations.qr import png_data_url, render_qr_code_png
from src.invitations.tokens import (
    build_rsvp_url,
    create_invitation_token,
    decode_invitation_token,
)


def test_token_carries_group_id():
    group_id = uuid4()

    token = create_invitation_token(group_id)

    assert decode_invitation_token(token) == group_id


def test_tokens_for_the_same_group_can_be_reissued():
    group_id = uuid4()
    issued_earlier = datetime.now(UTC) - timedelta(hours=1)

    first = create_invitation_token(group_id, now=issued_earlier)
    second = create_invitation_token(group_id)

    assert first != second
    assert decode_invitation_token(first) == decode_invitation_token(second) == group_id


def test_expired_token_is_rejected():
    issued_long_ago = datetime.now(UTC) - timedelta(days=settings.invitation_token_expire_days + 1)
    token = create_invitation_token(uuid4(), now=issued_long_ago)

    with pytest.raises(InvalidInvitationTokenError):
        decode_invitation_token(token)


def test_tampered_token_is_rejected():
    header, payload, _ = create_invitation_token(uuid4()).split(".")
    _, _, other_signature = create_invitation_token(uuid4()).split(".")
    forged = jwt.encode(
        {"sub": str(uuid4()), "typ": "rsvp-invitation"}, "not-the-secret", algorithm="HS256"
    )

    with pytest.raises(InvalidInvitationTokenError):
        decode_invitation_token(forged)
    with pytest.raises(InvalidInvitationTokenError):
        decode_invitation_token(f"{header}.{payload}.{other_signature}")


def test_garbage_token_is_rejected():
    with pytest.raises(InvalidInvitationTokenError):
        decode_invitation_token("bm90LWEtdG9rZW4=")


def test_token_of_other_type_is_rejected():
    token = jwt.encode(
        {"sub": str(uuid4()), "typ": "access"}, settings.secret_key, algorithm=settings.algorithm
    )

    with pytest.raises(InvalidInvitationTokenError):
        decode_invitation_token(token)


def test_build_rsvp_url():
    assert build_rsvp_url("abc") == f"{settings.frontend_url.rstrip('/')}/rsvp/abc"


def test_qr_code_is_png():
    png = render_qr_code_png("http://localhost:5173/rsvp/abc")

    assert png.startswith(b"\x89PNG\r\n\x1a\n")
    assert png_data_url(png).startswith("data:image/png;base64,iVBORw0KGgo")
