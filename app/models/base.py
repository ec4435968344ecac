from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from sqlalchemy import DateTime
from sqlalchemy.dialects.mysql import DATETIME as MySQLDateTime
from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite hands back naive datetimes; treat them as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def timestamp_type():
    return DateTime(timezone=True).with_variant(MySQLDateTime(fsp=6), "mysql")


class IDModel(SQLModel):
    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True, index=True)


class CreatedAtModel(SQLModel):
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=timestamp_type(),
        sa_column_kwargs={"nullable": False},
    )
