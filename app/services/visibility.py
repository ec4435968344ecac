"""Who gets to see a notification.

A notification is listed for a viewer when its role targets the viewer's role
(or ``all``), it is either a broadcast or addressed to the viewer, and the
viewer has not dismissed it. The first two conditions are also available as a
SQL clause so the store can narrow candidates before the dismissed sets load.
"""

from typing import Any, Collection, Protocol

from sqlalchemy import and_, or_
from sqlalchemy.sql.elements import ColumnElement

from app.models.enums import NotificationRole
from app.models.notification import Notification


class VisibleRecord(Protocol):
    role: Any
    user_id: Any
    dismissed: Collection[str]


def _role_value(role: Any) -> str:
    if isinstance(role, NotificationRole):
        return role.value
    return str(role)


def role_matches(notification_role: Any, viewer_role: str) -> bool:
    value = _role_value(notification_role)
    return value == viewer_role or value == NotificationRole.ALL.value


def audience_matches(notification_user_id: Any, viewer_id: str) -> bool:
    return notification_user_id is None or notification_user_id == viewer_id


def is_visible(notification: VisibleRecord, viewer_id: str, viewer_role: str) -> bool:
    return (
        role_matches(notification.role, viewer_role)
        and audience_matches(notification.user_id, viewer_id)
        and viewer_id not in notification.dismissed
    )


def audience_clause(viewer_id: str, viewer_role: str) -> ColumnElement[bool]:
    roles = [NotificationRole.ALL]
    if viewer_role in NotificationRole.values() and viewer_role != NotificationRole.ALL.value:
        roles.append(NotificationRole(viewer_role))
    return and_(
        Notification.role.in_(roles),
        or_(Notification.user_id.is_(None), Notification.user_id == viewer_id),
    )
