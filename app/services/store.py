# app/services/store.py
import logging
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import StoreUnavailable

logger = logging.getLogger(__name__)


@asynccontextmanager
async def store_guard(db: AsyncSession, action: str):
    """Turn database errors raised inside the block into StoreUnavailable.

    The session is rolled back so nothing from a half-finished unit of work
    is left pending.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("store failure during %s", action)
        await db.rollback()
        raise StoreUnavailable(f"Could not {action}") from exc
