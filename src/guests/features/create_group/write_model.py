"""Write model for creating invitation groups, optionally with a postal address."""

import logging
from abc import ABC, abstractmethod
from functools import partial

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.guests.dtos import GroupWithGuestsDTO, NewAddress
from src.guests.repository.mappers import address_to_dto, group_with_guests_to_dto
from src.guests.repository.orm_models import Address, Group

logger = logging.getLogger(__name__)


class GroupCreateWriteModel(ABC):
    @abstractmethod
    async def create_group(self, name: str, address: NewAddress | None = None) -> GroupWithGuestsDTO:
        raise NotImplementedError


class SqlGroupCreateWriteModel(GroupCreateWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_group(self, name: str, address: NewAddress | None = None) -> GroupWithGuestsDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            address_row = None
            if address:
                address_row = Address(
                    house_number=address.house_number,
                    street_address=address.street_address,
                    city=address.city,
                    state_province=address.state_province,
                    postal_code=address.postal_code,
                    country=address.country,
                    delivery_instructions=address.delivery_instructions,
                )
                session.add(address_row)
                await session.flush()

            group = Group(name=name, address_id=address_row.uuid if address_row else None)
            session.add(group)
            await session.flush()

            logger.info("Created group %s (%s)", name, group.uuid)
            return group_with_guests_to_dto(
                group,
                members=[],
                address=address_to_dto(address_row) if address_row else None,
            )
