from dataclasses import dataclass

from loguru import logger
from sqlmodel import Session

from app.core.errors import NotFound
from app.schemas.notification import NotificationOut
from app.services.notification_store import (
    add_dismissal,
    get_notification,
    has_dismissed,
    load_notification_out,
)


@dataclass(frozen=True)
class DismissalResult:
    notification: NotificationOut
    already_dismissed: bool


def dismiss_notification(session: Session, notification_id: int, user_id: str) -> DismissalResult:
    record = get_notification(session, notification_id)
    if record is None:
        raise NotFound('Notification not found')

    if has_dismissed(session, notification_id, user_id):
        return DismissalResult(notification=load_notification_out(session, record), already_dismissed=True)

    inserted = add_dismissal(session, notification_id, user_id)
    if inserted:
        logger.info('notification.dismissed', notification_id=notification_id, user_id=user_id)
    else:
        # same user raced us between the membership check and the insert
        logger.debug('notification.dismiss_conflict', notification_id=notification_id, user_id=user_id)
    return DismissalResult(
        notification=load_notification_out(session, record),
        already_dismissed=not inserted,
    )
