from fastapi import APIRouter
from quotes_service.api import health, quotes

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(quotes.router, prefix="/quotes", tags=["quotes"])
