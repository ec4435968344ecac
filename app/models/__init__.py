from app.models.base import CreatedAtModel, IDModel
from app.models.user import User
from app.models.notification import Notification, NotificationDismissal

__all__ = [
    'IDModel',
    'CreatedAtModel',
    'User',
    'Notification',
    'NotificationDismissal',
]
