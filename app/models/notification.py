from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel
from app.models.base import CreatedAtModel, timestamp_type, utc_now
from app.models.enums import NotificationRole, enum_column


class Notification(CreatedAtModel, SQLModel, table=True):
    __tablename__ = 'notifications'

    # assigned by the service as max(id) + 1
    id: Optional[int] = Field(default=None, primary_key=True, sa_column_kwargs={'autoincrement': False})
    user_id: Optional[str] = Field(default=None, index=True)
    title: str
    role: NotificationRole = Field(
        sa_column=enum_column(NotificationRole, 'notification_role', index=True),
    )
    message: str


class NotificationDismissal(SQLModel, table=True):
    """One row per (notification, user) pair; the composite key keeps the set unique."""

    __tablename__ = 'notification_dismissals'

    notification_id: int = Field(foreign_key='notifications.id', primary_key=True)
    user_id: str = Field(primary_key=True)
    dismissed_at: datetime = Field(
        default_factory=utc_now,
        sa_type=timestamp_type(),
        sa_column_kwargs={"nullable": False},
    )
