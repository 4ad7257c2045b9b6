import os
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from typing import AsyncGenerator

# Configure the app for tests via settings rather than hardcoding: an
# in-memory sqlite database and a cheap password transform.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("CREDENTIAL_SALT", "test-salt")
os.environ.setdefault("CREDENTIAL_ITERATIONS", "1000")

from roster.core import config as _config  # noqa: E402
_config.get_settings.cache_clear()  # ensure new env vars are picked up # type: ignore[attr-defined]
_settings = _config.get_settings()

from roster.api import deps  # noqa: E402
from roster.api.main import app  # noqa: E402
from roster.core.security import Pbkdf2CredentialTransform  # noqa: E402
from roster.db.session import build_engine, create_schema  # noqa: E402
from roster.repositories.user import UserRepository  # noqa: E402
from roster.services.user import UserService  # noqa: E402

@pytest.fixture(scope="session")
def settings():
    """Expose application settings to tests if needed."""
    return _settings

@pytest_asyncio.fixture()
async def engine():
    # in-memory sqlite: build_engine pins a single shared connection
    eng = build_engine("sqlite+aiosqlite://")
    await create_schema(eng)
    yield eng
    await eng.dispose()

@pytest.fixture()
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)

@pytest_asyncio.fixture()
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session

@pytest.fixture()
def transform():
    return Pbkdf2CredentialTransform("test-salt", iterations=1000)

@pytest.fixture()
def user_service(db_session, transform):
    return UserService(UserRepository(db_session), transform)

@pytest_asyncio.fixture()
async def client(session_factory):
    async def _get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[deps.get_db] = _get_db
    # httpx >=0.28 removed the 'app=' shortcut; use ASGITransport explicitly
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
