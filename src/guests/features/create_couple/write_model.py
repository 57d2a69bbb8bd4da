"""Write model for registering the wedding couple accounts.

A wedding has at most two couple accounts; they double as the "invited by"
dimension on guests.
"""

import logging
from abc import ABC, abstractmethod
from functools import partial

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.guests.dtos import CoupleDTO, CoupleLimitReachedError
from src.guests.repository.mappers import couple_to_dto
from src.guests.repository.orm_models import Couple

logger = logging.getLogger(__name__)

MAX_COUPLES = 2


class CoupleCreateWriteModel(ABC):
    @abstractmethod
    async def create_couple(
        self,
        first_name: str,
        last_name: str,
        email: str | None = None,
        auth_user_id: str | None = None,
    ) -> CoupleDTO:
        """Create a couple account. Raises CoupleLimitReachedError past the limit."""
        raise NotImplementedError


class SqlCoupleCreateWriteModel(CoupleCreateWriteModel):
    """SQL implementation of couple creation."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_couple(
        self,
        first_name: str,
        last_name: str,
        email: str | None = None,
        auth_user_id: str | None = None,
    ) -> CoupleDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            count = (await session.execute(select(func.count()).select_from(Couple))).scalar_one()
            if count >= MAX_COUPLES:
                raise CoupleLimitReachedError(MAX_COUPLES)

            couple = Couple(
                first_name=first_name,
                last_name=last_name,
                email=email,
                auth_user_id=auth_user_id,
            )
            session.add(couple)
            await session.flush()

            logger.info("Created couple %s %s (%s)", first_name, last_name, couple.uuid)
            return couple_to_dto(couple)
