import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text

from src.config.database import async_session_manager

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthCheckResponse(BaseModel):
    status: str
    database: str
    version: str = "0.1.0"


async def ping_database() -> bool:
    try:
        async with async_session_manager(auto_commit=False) as session:
            await session.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Database health check failed")
        return False
    return True


def get_database_check():
    """Dependency returning the coroutine function that pings the database."""
    return ping_database


@router.get("/", response_model=HealthCheckResponse)
async def health_check(ping=Depends(get_database_check)) -> HealthCheckResponse:
    """
    Health check endpoint to verify the API and its database are reachable.
    """
    if await ping():
        return HealthCheckResponse(status="healthy", database="ok")
    return HealthCheckResponse(status="degraded", database="unavailable")
