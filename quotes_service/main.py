from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from quotes_service.core.config import settings
from quotes_service.core.logging import setup_logging, get_logger
from quotes_service.api.router import api_router
from quotes_service.db.session import create_engine, create_sessionmaker

logger = get_logger()


def create_app(engine: Optional[AsyncEngine] = None) -> FastAPI:
    """Build the application around a connection pool.

    The engine is created from settings unless one is passed in, and is
    disposed when the application shuts down.
    """
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    if engine is None:
        engine = create_engine()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting %s", settings.PROJECT_NAME)
        yield
        logger.info("Shutting down, disposing connection pool")
        await engine.dispose()

    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)
    app.state.engine = engine
    app.state.sessionmaker = create_sessionmaker(engine)

    if settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.BACKEND_CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(api_router, prefix=settings.API_PREFIX)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("quotes_service.main:app", host=settings.HOST, port=settings.PORT)
