from uuid import uuid4

import pytest
from sqlalchemy import func, select

from src.guests.dtos import GroupNotFoundError, NewAddress
from src.guests.features.update_group.write_model import SqlGroupUpdateWriteModel
from src.guests.repository.orm_models import Address
from src.guests.repository.tests.helpers import add_group, add_guest

BELGIAN_ADDRESS = NewAddress(
    street_address="Meir",
    house_number="50",
    city="Antwerpen",
    postal_code="2000",
    country="Belgium",
)


async def _address_count(session) -> int:
    return (await session.execute(select(func.count()).select_from(Address))).scalar_one()


@pytest.mark.asyncio
async def test_update_group_name_keeps_members(db_session):
    group = await add_group(db_session, "The Bakkers")
    await add_guest(db_session, "Anna", group=group)

    updated = await SqlGroupUpdateWriteModel(session_overwrite=db_session).update_group(
        group.uuid, name="Bakker family"
    )

    assert updated.name == "Bakker family"
    assert [g.group_name for g in updated.guests] == ["Bakker family"]
    assert updated.guest_count == 1


@pytest.mark.asyncio
async def test_update_group_edits_existing_address_in_place(db_session):
    group = await add_group(db_session, "The Bakkers", country="Netherlands")
    address_id = group.address_id

    updated = await SqlGroupUpdateWriteModel(session_overwrite=db_session).update_group(
        group.uuid, address=BELGIAN_ADDRESS
    )

    assert updated.address_id == address_id
    assert updated.address.country == "Belgium"
    assert updated.address.city == "Antwerpen"
    assert await _address_count(db_session) == 1


@pytest.mark.asyncio
async def test_update_group_adds_missing_address(db_session):
    group = await add_group(db_session, "Colleagues")

    updated = await SqlGroupUpdateWriteModel(session_overwrite=db_session).update_group(
        group.uuid, address=BELGIAN_ADDRESS
    )

    assert updated.address.country == "Belgium"
    assert updated.address_id == updated.address.id


@pytest.mark.asyncio
async def test_remove_address(db_session):
    group = await add_group(db_session, "The Bakkers", country="Netherlands")

    updated = await SqlGroupUpdateWriteModel(session_overwrite=db_session).remove_address(
        group.uuid
    )

    assert updated.address is None
    assert updated.address_id is None
    assert await _address_count(db_session) == 0


@pytest.mark.asyncio
async def test_update_unknown_group(db_session):
    write_model = SqlGroupUpdateWriteModel(session_overwrite=db_session)

    with pytest.raises(GroupNotFoundError):
        await write_model.update_group(uuid4(), name="Nobody")
    with pytest.raises(GroupNotFoundError):
        await write_model.remove_address(uuid4())
