from uuid import UUID

from sqlalchemy import Boolean, Enum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.guests.dtos import AgeCategory, GuestStatus
from src.models.base import Base, TimeStamp


class Couple(Base, TimeStamp):
    __tablename__ = TableNames.COUPLES.value

    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # Account id issued by the external auth provider
    auth_user_id: Mapped[str | None] = mapped_column(
        String(255), nullable=True, unique=True, index=True
    )

    def __repr__(self) -> str:
        return f"<Couple {self.first_name} {self.last_name}>"


class Address(Base, TimeStamp):
    __tablename__ = TableNames.ADDRESSES.value

    house_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    street_address: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(255), nullable=False)
    state_province: Mapped[str | None] = mapped_column(String(255), nullable=True)
    postal_code: Mapped[str] = mapped_column(String(50), nullable=False)
    country: Mapped[str] = mapped_column(String(255), nullable=False)
    delivery_instructions: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Address {self.street_address}, {self.city}, {self.country}>"


class Group(Base, TimeStamp):
    __tablename__ = TableNames.GROUPS.value

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address_id: Mapped[UUID | None] = mapped_column(
        ForeignKey(f"{TableNames.ADDRESSES.value}.uuid", ondelete="SET NULL"),
        nullable=True,
    )
    qr_code_generated: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    qr_code_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Group {self.name}>"


class Guest(Base, TimeStamp):
    __tablename__ = TableNames.GUESTS.value

    first_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)

    age_category: Mapped[AgeCategory] = mapped_column(
        Enum(AgeCategory, name="age_category_enum", values_callable=lambda x: [e.value for e in x]),
        default=AgeCategory.ADULT,
        nullable=False,
    )
    rsvp_status: Mapped[GuestStatus] = mapped_column(
        Enum(GuestStatus, name="rsvp_status_enum", values_callable=lambda x: [e.value for e in x]),
        default=GuestStatus.PENDING,
        nullable=False,
        index=True,
    )

    group_id: Mapped[UUID | None] = mapped_column(
        ForeignKey(f"{TableNames.GROUPS.value}.uuid", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    # The couple who invited this guest
    invited_by: Mapped[UUID | None] = mapped_column(
        ForeignKey(f"{TableNames.COUPLES.value}.uuid", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Guest {self.first_name} {self.last_name} - {self.rsvp_status.value}>"
