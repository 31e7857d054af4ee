from __future__ import annotations
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, Text, DateTime, Uuid
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Quote(Base):
    __tablename__ = "quotes"
    id = Column(Uuid(as_uuid=True), primary_key=True)
    book = Column(Text, nullable=False)
    quote = Column(Text, nullable=False)
    inserted_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    @classmethod
    def new(cls, book: str, quote: str) -> "Quote":
        """Build an unsaved quote with a fresh id; both timestamps share one instant."""
        now = utcnow()
        return cls(
            id=uuid.uuid4(),
            book=book,
            quote=quote,
            inserted_at=now,
            updated_at=now,
        )
