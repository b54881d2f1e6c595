"""
Shared fixtures: an isolated SQLite database per test and an in-process
HTTP client for the app.
"""

import httpx
import pytest
import pytest_asyncio

from config.settings import Settings
from database.session import build_engine, build_session_factory, init_models


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'forum.db'}",
        jwt_secret="test-secret",
        jwt_expiry_seconds=3600,
        bcrypt_rounds=4,
    )


@pytest_asyncio.fixture
async def engine(settings):
    engine = build_engine(settings)
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def app(settings):
    from main import create_app

    app = create_app(settings)
    # ASGITransport does not send lifespan events, so create tables here.
    await init_models(app.state.engine)
    yield app
    await app.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
