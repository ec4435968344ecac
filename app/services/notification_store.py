from collections import defaultdict
from typing import Iterable, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.models.notification import Notification, NotificationDismissal
from app.schemas.notification import NotificationOut
from app.models.base import ensure_utc
from app.services.visibility import audience_clause


def next_notification_id(session: Session) -> int:
    result = session.exec(select(func.max(Notification.id))).one()
    return int(result or 0) + 1


def insert_notification(session: Session, record: Notification) -> Notification:
    session.add(record)
    session.commit()
    session.refresh(record)
    return record


def get_notification(session: Session, notification_id: int) -> Optional[Notification]:
    return session.exec(select(Notification).where(Notification.id == notification_id)).first()


def select_for_audience(session: Session, viewer_id: str, viewer_role: str) -> list[Notification]:
    statement = (
        select(Notification)
        .where(audience_clause(viewer_id, viewer_role))
        .order_by(Notification.created_at.desc(), Notification.id.asc())
    )
    return list(session.exec(statement).all())


def dismissed_by(session: Session, notification_ids: Iterable[int]) -> dict[int, list[str]]:
    ids = list(notification_ids)
    if not ids:
        return {}
    statement = (
        select(NotificationDismissal)
        .where(NotificationDismissal.notification_id.in_(ids))
        .order_by(NotificationDismissal.dismissed_at.asc(), NotificationDismissal.user_id.asc())
    )
    grouped: dict[int, list[str]] = defaultdict(list)
    for row in session.exec(statement).all():
        grouped[row.notification_id].append(row.user_id)
    return dict(grouped)


def has_dismissed(session: Session, notification_id: int, user_id: str) -> bool:
    statement = select(NotificationDismissal).where(
        (NotificationDismissal.notification_id == notification_id)
        & (NotificationDismissal.user_id == user_id)
    )
    return session.exec(statement).first() is not None


def add_dismissal(session: Session, notification_id: int, user_id: str) -> bool:
    """Insert the pair; returns False when another writer already stored it."""
    session.add(NotificationDismissal(notification_id=notification_id, user_id=user_id))
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        return False
    return True


def to_notification_out(record: Notification, dismissed: Optional[list[str]] = None) -> NotificationOut:
    return NotificationOut(
        id=record.id,
        user_id=record.user_id,
        title=record.title,
        role=record.role,
        message=record.message,
        dismissed=list(dismissed or []),
        created_at=ensure_utc(record.created_at),
    )


def load_notification_out(session: Session, record: Notification) -> NotificationOut:
    dismissed = dismissed_by(session, [record.id]).get(record.id, [])
    return to_notification_out(record, dismissed)
