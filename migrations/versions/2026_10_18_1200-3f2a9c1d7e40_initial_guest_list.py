"""Initial guest list schema: couples, addresses, groups and guests

Revision ID: 3f2a9c1d7e40
Revises:
Create Date: 2026-10-18 12:00:00

"""
from collections.abc import Sequence

import sqlalchemy as sa
import sqlalchemy_utils
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7e40"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _uuid_pk() -> sa.Column:
    return sa.Column("uuid", sqlalchemy_utils.UUIDType(binary=False), primary_key=True)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "couples",
        _uuid_pk(),
        *_timestamps(),
        sa.Column("first_name", sa.String(255), nullable=False),
        sa.Column("last_name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("auth_user_id", sa.String(255), nullable=True),
    )
    op.create_index("ix_couples_auth_user_id", "couples", ["auth_user_id"], unique=True)

    op.create_table(
        "addresses",
        _uuid_pk(),
        *_timestamps(),
        sa.Column("house_number", sa.String(50), nullable=True),
        sa.Column("street_address", sa.String(255), nullable=False),
        sa.Column("city", sa.String(255), nullable=False),
        sa.Column("state_province", sa.String(255), nullable=True),
        sa.Column("postal_code", sa.String(50), nullable=False),
        sa.Column("country", sa.String(255), nullable=False),
        sa.Column("delivery_instructions", sa.Text, nullable=True),
    )

    op.create_table(
        "groups",
        _uuid_pk(),
        *_timestamps(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column(
            "address_id",
            sqlalchemy_utils.UUIDType(binary=False),
            sa.ForeignKey("addresses.uuid", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("qr_code_generated", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("qr_code_url", sa.Text, nullable=True),
    )

    op.create_table(
        "guests",
        _uuid_pk(),
        *_timestamps(),
        sa.Column("first_name", sa.String(255), nullable=False),
        sa.Column("last_name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column(
            "age_category",
            sa.Enum("adult", "child", name="age_category_enum"),
            nullable=False,
            server_default="adult",
        ),
        sa.Column(
            "rsvp_status",
            sa.Enum("pending", "confirmed", "declined", name="rsvp_status_enum"),
            nullable=False,
            server_default="pending",
        ),
        sa.Column(
            "group_id",
            sqlalchemy_utils.UUIDType(binary=False),
            sa.ForeignKey("groups.uuid", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column(
            "invited_by",
            sqlalchemy_utils.UUIDType(binary=False),
            sa.ForeignKey("couples.uuid", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("notes", sa.Text, nullable=True),
    )
    for column in ("first_name", "last_name", "rsvp_status", "group_id", "invited_by"):
        op.create_index(f"ix_guests_{column}", "guests", [column])


def downgrade() -> None:
    op.drop_table("guests")
    op.drop_table("groups")
    op.drop_table("addresses")
    op.drop_table("couples")
    sa.Enum(name="rsvp_status_enum").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="age_category_enum").drop(op.get_bind(), checkfirst=True)
