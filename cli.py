"""CLI commands for managing the wedding guest list."""

import asyncio
import json
from dataclasses import asdict
from pathlib import Path
from uuid import UUID

import typer

from src.config.logging import setup_logging
from src.dashboard.schemas import DashboardStatsResponse
from src.dashboard.service import get_dashboard_service
from src.guests.dtos import (
    AgeCategory,
    CoupleLimitReachedError,
    CoupleNotFoundError,
    GroupNotFoundError,
    GuestNotFoundError,
    NewAddress,
)
from src.guests.features.create_couple.write_model import SqlCoupleCreateWriteModel
from src.guests.features.create_group.write_model import SqlGroupCreateWriteModel
from src.guests.features.create_guest.write_model import SqlGuestCreateWriteModel
from src.guests.features.delete_group.write_model import SqlGroupDeleteWriteModel
from src.guests.features.delete_guest.write_model import SqlGuestDeleteWriteModel
from src.guests.features.issue_invitation.write_model import SqlInvitationWriteModel
from src.guests.features.move_guests.write_model import SqlGuestMoveWriteModel

app = typer.Typer(help="CLI commands for wedding guest list management")


@app.callback()
def main():
    setup_logging()


@app.command()
def create_couple(
    first_name: str = typer.Argument(..., help="First name"),
    last_name: str = typer.Argument(..., help="Last name"),
    email: str = typer.Option(None, "--email", "-e", help="Contact email"),
    auth_user_id: str = typer.Option(None, "--auth-user-id", help="Id from the auth provider"),
):
    """Register one of the (at most two) couple accounts."""
    try:
        couple = asyncio.run(
            SqlCoupleCreateWriteModel().create_couple(
                first_name=first_name,
                last_name=last_name,
                email=email,
                auth_user_id=auth_user_id,
            )
        )
    except CoupleLimitReachedError as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho("Couple created!", fg=typer.colors.GREEN)
    typer.secho(f"  Name: {couple.full_name}", fg=typer.colors.BLUE)
    typer.secho(f"  Couple ID: {couple.id}", fg=typer.colors.CYAN)


@app.command()
def create_group(
    name: str = typer.Argument(..., help="Group name, e.g. 'The Bakkers'"),
    street: str = typer.Option(None, "--street", help="Street address"),
    house_number: str = typer.Option(None, "--house-number", help="House number"),
    city: str = typer.Option(None, "--city", help="City"),
    state_province: str = typer.Option(None, "--state", help="State or province"),
    postal_code: str = typer.Option(None, "--postal-code", help="Postal code"),
    country: str = typer.Option(None, "--country", help="Country"),
):
    """Create an invitation group, optionally with its postal address."""
    address = None
    address_parts = (street, city, postal_code, country)
    if any(address_parts):
        if not all(address_parts):
            typer.secho(
                "An address needs --street, --city, --postal-code and --country",
                fg=typer.colors.RED,
            )
            raise typer.Exit(1)
        address = NewAddress(
            street_address=street,
            house_number=house_number,
            city=city,
            state_province=state_province,
            postal_code=postal_code,
            country=country,
        )

    group = asyncio.run(SqlGroupCreateWriteModel().create_group(name, address=address))

    typer.secho("Group created!", fg=typer.colors.GREEN)
    typer.secho(f"  Group ID: {group.id}", fg=typer.colors.CYAN)
    if group.address:
        typer.secho(f"  Country: {group.address.country}", fg=typer.colors.BLUE)


@app.command()
def add_guest(
    first_name: str = typer.Argument(..., help="First name"),
    last_name: str = typer.Argument(..., help="Last name"),
    group_id: str = typer.Option(None, "--group", "-g", help="Group UUID"),
    invited_by: str = typer.Option(None, "--invited-by", "-i", help="Couple UUID"),
    child: bool = typer.Option(False, "--child", help="Register as a child"),
    email: str = typer.Option(None, "--email", "-e", help="Email"),
    phone: str = typer.Option(None, "--phone", "-p", help="Phone number"),
):
    """Add a guest to the list, optionally to a group."""
    try:
        guest = asyncio.run(
            SqlGuestCreateWriteModel().create_guest(
                first_name=first_name,
                last_name=last_name,
                age_category=AgeCategory.CHILD if child else AgeCategory.ADULT,
                email=email,
                phone=phone,
                group_id=UUID(group_id) if group_id else None,
                invited_by=UUID(invited_by) if invited_by else None,
            )
        )
    except (GroupNotFoundError, CoupleNotFoundError, ValueError) as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho("Guest added!", fg=typer.colors.GREEN)
    typer.secho(f"  Name: {guest.full_name} ({guest.age_category.value})", fg=typer.colors.BLUE)
    typer.secho(f"  Guest ID: {guest.id}", fg=typer.colors.CYAN)
    if guest.group_name:
        typer.secho(f"  Group: {guest.group_name}", fg=typer.colors.BLUE)


@app.command()
def move_guest(
    guest_id: str = typer.Argument(..., help="Guest UUID"),
    group_id: str = typer.Option(None, "--group", "-g", help="Target group UUID; omit to ungroup"),
):
    """Move a guest to another group, or out of their group."""
    try:
        guest = asyncio.run(
            SqlGuestMoveWriteModel().move_guest_to_group(
                UUID(guest_id), UUID(group_id) if group_id else None
            )
        )
    except (GuestNotFoundError, GroupNotFoundError, ValueError) as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho("Guest moved!", fg=typer.colors.GREEN)
    typer.secho(f"  {guest.full_name}: {guest.group_name or 'no group'}", fg=typer.colors.BLUE)


@app.command()
def delete_guest(
    guest_id: str = typer.Argument(..., help="Guest UUID"),
):
    """Delete a guest. A group left empty is deleted with its address."""
    try:
        group_deleted = asyncio.run(SqlGuestDeleteWriteModel().delete_guest(UUID(guest_id)))
    except (GuestNotFoundError, ValueError) as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho("Guest deleted!", fg=typer.colors.GREEN)
    if group_deleted:
        typer.secho("  Their group was empty and has been deleted", fg=typer.colors.YELLOW)


@app.command()
def delete_group(
    group_id: str = typer.Argument(..., help="Group UUID"),
    reassign_to: str = typer.Option(
        None, "--reassign-to", "-r", help="Move the members to this group instead of ungrouping them"
    ),
):
    """Delete a group and its address."""
    try:
        moved = asyncio.run(
            SqlGroupDeleteWriteModel().delete_group(
                UUID(group_id), reassign_to=UUID(reassign_to) if reassign_to else None
            )
        )
    except (GroupNotFoundError, ValueError) as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho("Group deleted!", fg=typer.colors.GREEN)
    typer.secho(f"  Guests moved: {moved}", fg=typer.colors.BLUE)


@app.command()
def issue_invitation(
    group_id: str = typer.Argument(..., help="Group UUID"),
    qr_output: Path = typer.Option(None, "--qr-output", "-o", help="Write the QR code PNG here"),
):
    """Issue (or reissue) the RSVP link and QR code for a group."""
    try:
        invitation = asyncio.run(SqlInvitationWriteModel().issue_invitation(UUID(group_id)))
    except (GroupNotFoundError, ValueError) as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho("Invitation issued!", fg=typer.colors.GREEN)
    typer.secho(f"  RSVP URL: {invitation.rsvp_url}", fg=typer.colors.CYAN)
    if qr_output:
        qr_output.write_bytes(invitation.qr_code_png)
        typer.secho(f"  QR code written to {qr_output}", fg=typer.colors.BLUE)


@app.command()
def dashboard():
    """Print the dashboard statistics as JSON."""
    stats = asyncio.run(get_dashboard_service().get_dashboard_stats())

    response = DashboardStatsResponse.model_validate(asdict(stats))
    typer.echo(json.dumps(response.model_dump(mode="json", by_alias=True), indent=2))


if __name__ == "__main__":
    app()
