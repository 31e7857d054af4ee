from typing import AsyncGenerator
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a session from the pool owned by the application."""
    async with request.app.state.sessionmaker() as session:
        yield session
