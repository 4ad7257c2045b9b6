"""Engine and session plumbing for the user store.

``build_engine`` knows the one dialect quirk this service cares about: an
in-memory SQLite database only exists on a single connection, so it gets a
``StaticPool``. Everything else goes straight to ``create_async_engine``.
"""
from typing import Any, AsyncGenerator

from sqlalchemy import MetaData
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from roster.core.config import get_settings

__all__ = [
    "Base",
    "build_engine",
    "create_schema",
    "engine",
    "AsyncSessionLocal",
    "get_db",
]

# Constraint names must match the ones written by the Alembic migrations.
metadata = MetaData(naming_convention={
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "pk": "pk_%(table_name)s",
})


class Base(DeclarativeBase):
    metadata = metadata


def build_engine(url: str, **kwargs: Any) -> AsyncEngine:
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        if parsed.database in (None, "", ":memory:"):
            kwargs.setdefault("poolclass", StaticPool)
    return create_async_engine(url, **kwargs)


async def create_schema(target: AsyncEngine) -> None:
    """Create every mapped table; for tests and throwaway databases, not production."""
    import roster.models  # noqa: F401 registers the mappers on Base.metadata

    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


engine = build_engine(get_settings().database_url_async)
AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield one session per request; callers commit, anything else rolls back on close."""
    async with AsyncSessionLocal() as session:
        yield session
