"""
Quote CRUD endpoints.

Every handler runs exactly one statement on the session it is given.
Zero affected rows on update/delete means the id does not exist (404).
Any SQLAlchemy error, or an OS-level connection failure the driver raises
unwrapped, is logged and reported as a bare 500; the driver
message never reaches the client.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import select, update, delete
from typing import List
from uuid import UUID

from quotes_service.api import deps
from quotes_service.core.logging import get_logger
from quotes_service.db import models
from quotes_service.schemas import quote as schemas

router = APIRouter()
logger = get_logger("api.quotes")


# asyncpg raises ConnectionRefusedError and friends without SQLAlchemy wrapping
STORAGE_ERRORS = (SQLAlchemyError, OSError)


def storage_error(action: str, exc: Exception) -> HTTPException:
    logger.error("Storage error while %s: %s", action, exc, exc_info=exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal Server Error",
    )


def not_found(quote_id: UUID) -> HTTPException:
    logger.info("Quote %s not found", quote_id)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Quote not found")


@router.post("", response_model=schemas.Quote, status_code=status.HTTP_201_CREATED)
async def create_quote(
    quote_in: schemas.QuoteCreate,
    db: AsyncSession = Depends(deps.get_db),
):
    quote = models.Quote.new(book=quote_in.book, quote=quote_in.quote)

    db.add(quote)
    try:
        await db.commit()
    except STORAGE_ERRORS as e:
        raise storage_error("creating quote", e)

    logger.info("Created quote %s", quote.id)
    return quote


@router.get("", response_model=List[schemas.Quote])
async def list_quotes(db: AsyncSession = Depends(deps.get_db)):
    try:
        result = await db.execute(select(models.Quote))
    except STORAGE_ERRORS as e:
        raise storage_error("listing quotes", e)
    return result.scalars().all()


@router.put("/{quote_id}")
async def update_quote(
    quote_id: UUID,
    quote_in: schemas.QuoteCreate,
    db: AsyncSession = Depends(deps.get_db),
):
    stmt = (
        update(models.Quote)
        .where(models.Quote.id == quote_id)
        .values(book=quote_in.book, quote=quote_in.quote, updated_at=models.utcnow())
        .execution_options(synchronize_session=False)
    )
    try:
        result = await db.execute(stmt)
        await db.commit()
    except STORAGE_ERRORS as e:
        raise storage_error(f"updating quote {quote_id}", e)

    if result.rowcount == 0:
        raise not_found(quote_id)

    logger.info("Updated quote %s", quote_id)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{quote_id}")
async def delete_quote(
    quote_id: UUID,
    db: AsyncSession = Depends(deps.get_db),
):
    stmt = (
        delete(models.Quote)
        .where(models.Quote.id == quote_id)
        .execution_options(synchronize_session=False)
    )
    try:
        result = await db.execute(stmt)
        await db.commit()
    except STORAGE_ERRORS as e:
        raise storage_error(f"deleting quote {quote_id}", e)

    if result.rowcount == 0:
        raise not_found(quote_id)

    logger.info("Deleted quote %s", quote_id)
    return Response(status_code=status.HTTP_200_OK)
