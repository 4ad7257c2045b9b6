import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

async def check_db(session: AsyncSession) -> bool:
    """Return True if the database answers a trivial ``SELECT 1``."""
    try:
        await session.execute(text("SELECT 1"))
        return True
    except (SQLAlchemyError, OSError):
        logger.warning("database readiness check failed", exc_info=True, extra={"event": "health.db_unavailable"})
        return False
