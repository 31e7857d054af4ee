from pydantic import BaseModel, field_validator
from uuid import UUID
from datetime import datetime, timezone

class QuoteBase(BaseModel):
    book: str
    quote: str

class QuoteCreate(QuoteBase):
    pass

class Quote(QuoteBase):
    id: UUID
    inserted_at: datetime
    updated_at: datetime

    @field_validator("inserted_at", "updated_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # SQLite hands back naive datetimes; everything is stored as UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    class Config:
        from_attributes = True
