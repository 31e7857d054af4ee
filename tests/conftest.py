"""
Fixtures for the Quotes API tests.

The app runs against an in-memory SQLite database shared through a
StaticPool, seeded with one quote before each test.
"""

from datetime import datetime, timezone
from uuid import UUID

import httpx
import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from quotes_service.db.models import Base, Quote
from quotes_service.db.session import create_sessionmaker
from quotes_service.main import create_app

SEEDED_ID = UUID("a0eebc99-9c0b-4ef8-bb6d-6bb9bd380a11")
SEEDED_AT = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with create_sessionmaker(engine)() as session:
        session.add(
            Quote(
                id=SEEDED_ID,
                book="The Name of the Wind",
                quote="Words are pale shadows of forgotten names.",
                inserted_at=SEEDED_AT,
                updated_at=SEEDED_AT,
            )
        )
        await session.commit()

    yield engine
    await engine.dispose()


@pytest.fixture
def app(engine):
    return create_app(engine=engine)


@pytest.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
async def broken_store(engine):
    """Drop the quotes table so every statement fails at the driver."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    return engine


@pytest.fixture
def seeded_id():
    """Id of the quote present in every fresh database."""
    return SEEDED_ID


@pytest.fixture
async def unreachable_client():
    """Client for an app whose pool points at a closed port."""
    engine = create_async_engine("postgresql+asyncpg://u:p@127.0.0.1:1/db")
    transport = httpx.ASGITransport(app=create_app(engine=engine))
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    await engine.dispose()
