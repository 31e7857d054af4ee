from typing import Optional
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from quotes_service.core.config import settings


def create_engine(url: Optional[str] = None, **kwargs) -> AsyncEngine:
    """Create the pooled engine shared by all requests."""
    kwargs.setdefault("echo", settings.DB_ECHO)
    return create_async_engine(url or settings.DATABASE_URL, **kwargs)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False so a committed Quote can still be serialized
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
