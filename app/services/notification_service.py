from contextlib import contextmanager
from typing import Optional, Union

from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session

from app.core.config import settings
from app.core.errors import Forbidden, InvalidInput, StorageFailure
from app.models.base import utc_now
from app.models.enums import NotificationRole, UserRole
from app.models.notification import Notification
from app.schemas.notification import NotificationCreate, NotificationListOut, NotificationOut
from app.services.dismissal import DismissalResult, dismiss_notification
from app.services.notification_store import (
    dismissed_by,
    insert_notification,
    next_notification_id,
    select_for_audience,
    to_notification_out,
)
from app.services.visibility import is_visible

# largest value a signed 64-bit integer column can bind
MAX_NOTIFICATION_ID = 2**63 - 1


@contextmanager
def _storage_errors(session: Session, action: str):
    try:
        yield
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error('notification.storage_failed', action=action, error=str(exc))
        raise StorageFailure(f'Failed to {action}', details=str(exc)) from exc


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def list_visible(session: Session, user_id: Optional[str], role: Optional[str]) -> NotificationListOut:
    viewer_id = _clean(user_id)
    viewer_role = _clean(role)
    if not viewer_id or not viewer_role:
        raise InvalidInput('Missing required parameters: userId and role')

    with _storage_errors(session, 'fetch notifications'):
        candidates = select_for_audience(session, viewer_id, viewer_role)
        dismissed = dismissed_by(session, [record.id for record in candidates])
        records = [to_notification_out(record, dismissed.get(record.id)) for record in candidates]

    visible = [record for record in records if is_visible(record, viewer_id, viewer_role)]
    return NotificationListOut(notifications=visible, count=len(visible))


def create_notification(session: Session, payload: NotificationCreate) -> NotificationOut:
    if payload.current_user_role != UserRole.ADMIN.value:
        raise Forbidden('Unauthorized: Only admins can create notifications')

    title = payload.title
    message = payload.message
    role = _clean(payload.role)
    if not _clean(title) or not _clean(message) or not role:
        raise InvalidInput('Missing required fields: title, message, role')
    if role not in NotificationRole.values():
        raise InvalidInput(f"Invalid role. Must be one of: {', '.join(NotificationRole.values())}")
    target_user_id = _clean(payload.user_id)

    attempts = max(settings.CREATE_ID_RETRIES, 1)
    with _storage_errors(session, 'create notification'):
        for attempt in range(1, attempts + 1):
            record = Notification(
                id=next_notification_id(session),
                user_id=target_user_id,
                title=title,
                role=NotificationRole(role),
                message=message,
                created_at=utc_now(),
            )
            try:
                record = insert_notification(session, record)
            except IntegrityError:
                session.rollback()
                if attempt == attempts:
                    raise
                logger.warning('notification.id_conflict', notification_id=record.id, attempt=attempt)
                continue
            break

    logger.info(
        'notification.created',
        notification_id=record.id,
        role=record.role.value,
        targeted=record.user_id is not None,
    )
    return to_notification_out(record)


def parse_notification_id(raw: Union[int, str, None]) -> int:
    if isinstance(raw, bool):
        raise InvalidInput('Invalid notification ID')
    if isinstance(raw, int):
        value = raw
    else:
        text = (raw or '').strip()
        if not text.isdecimal():
            raise InvalidInput('Invalid notification ID')
        value = int(text)
    if value <= 0 or value > MAX_NOTIFICATION_ID:
        raise InvalidInput('Invalid notification ID')
    return value


def dismiss(session: Session, notification_id: Union[int, str, None], user_id: Optional[str]) -> DismissalResult:
    parsed_id = parse_notification_id(notification_id)
    viewer_id = _clean(user_id)
    if not viewer_id:
        raise InvalidInput('Missing required field: userId')

    with _storage_errors(session, 'dismiss notification'):
        return dismiss_notification(session, parsed_id, viewer_id)
