"""
Shared test fixtures
"""
import os

# Keep the application from seeding its default database during imports
os.environ.setdefault("SEED_DEMO_DATA", "false")
os.environ.setdefault("NODE_ENV", "development")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from user_location_api.core.database import build_async_engine, build_session_maker, get_session_maker, init_db
from user_location_api.main import app
from user_location_api.models import Location, User
from user_location_api.repositories import LocationRepository, UserRepository
from user_location_api.services.seed_service import seed_demo_data


@pytest.fixture
def st_petersburg():
    """Location used by the demo fixture"""
    return Location(
        id=1,
        place="St Petersburg",
        description="St Petersburg is  a great place to live",
        latitude=30.6,
        longitude=40.5
    )


@pytest.fixture
def paul(st_petersburg):
    """User referencing the demo location"""
    return User(
        id=1,
        first_name="Paul",
        last_name="Ryan",
        email="paul@ryan.com",
        password="secret",
        location_id=st_petersburg.id,
        location=st_petersburg
    )


@pytest.fixture
def elton(st_petersburg):
    """Second user referencing the demo location"""
    return User(
        id=2,
        first_name="Elton",
        last_name="John",
        email="john@elton.com",
        password="s3cr3t",
        location_id=st_petersburg.id,
        location=st_petersburg
    )


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """Engine on a fresh SQLite file with the schema created"""
    engine = build_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(db_engine):
    """Session factory bound to the test engine"""
    return build_session_maker(db_engine)


@pytest.fixture
def location_repository(session_maker):
    return LocationRepository(session_maker)


@pytest.fixture
def user_repository(session_maker):
    return UserRepository(session_maker)


@pytest_asyncio.fixture
async def seeded_users(location_repository, user_repository):
    """Demo fixture loaded into the test database"""
    return await seed_demo_data(location_repository, user_repository)


@pytest_asyncio.fixture
async def api_client(session_maker):
    """HTTP client running the application against the test database"""
    app.dependency_overrides[get_session_maker] = lambda: session_maker
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()
