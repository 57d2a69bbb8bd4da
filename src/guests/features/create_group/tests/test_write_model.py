import pytest

from src.guests.dtos import NewAddress
from src.guests.features.create_group.write_model import SqlGroupCreateWriteModel
from src.guests.repository.read_models import SqlGuestReadModel


@pytest.mark.asyncio
async def test_create_group_with_address(db_session):
    group = await SqlGroupCreateWriteModel(session_overwrite=db_session).create_group(
        "The Bakkers",
        address=NewAddress(
            street_address="Keizersgracht",
            house_number="12",
            city="Amsterdam",
            postal_code="1015 CJ",
            country="Netherlands",
        ),
    )

    assert group.name == "The Bakkers"
    assert group.guests == []
    assert group.guest_count == 0
    assert group.qr_code_generated is False
    assert group.address.country == "Netherlands"

    stored = await SqlGuestReadModel(session_overwrite=db_session).get_group_with_guests(group.id)
    assert stored.address_id == group.address.id


@pytest.mark.asyncio
async def test_create_group_without_address(db_session):
    group = await SqlGroupCreateWriteModel(session_overwrite=db_session).create_group("Colleagues")

    assert group.address is None
    assert group.address_id is None
