from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from sqlmodel import Session, select

from app.models.enums import NotificationRole, UserRole
from app.models.notification import Notification
from app.models.user import User


@dataclass(frozen=True)
class DemoUser:
    id: str
    email: str
    name: str
    role: UserRole


@dataclass(frozen=True)
class DemoNotification:
    id: int
    title: str
    role: NotificationRole
    message: str
    created_at: datetime
    user_id: Optional[str] = None


@dataclass(frozen=True)
class SeedSummary:
    users: int
    notifications: int


def _utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


DEMO_USERS: tuple[DemoUser, ...] = (
    DemoUser('user-1', 'admin@example.com', 'Admin User', UserRole.ADMIN),
    DemoUser('user-2', 'editor@example.com', 'Editor User', UserRole.EDITOR),
    DemoUser('user-3', 'user@example.com', 'Regular User', UserRole.USER),
)

DEMO_NOTIFICATIONS: tuple[DemoNotification, ...] = (
    DemoNotification(
        1,
        'System Maintenance Scheduled',
        NotificationRole.ADMIN,
        'Server maintenance is scheduled for tomorrow at 2 AM UTC. Please inform your users.',
        _utc(2025, 10, 20, 10, 0),
    ),
    DemoNotification(
        2,
        'New Content Guidelines',
        NotificationRole.EDITOR,
        'Updated content guidelines are now available. Please review before publishing new content.',
        _utc(2025, 10, 20, 14, 30),
    ),
    DemoNotification(
        3,
        'Welcome to the CMS!',
        NotificationRole.ALL,
        'Thank you for joining our platform. Explore the features and let us know if you have questions.',
        _utc(2025, 10, 21, 8, 0),
    ),
    DemoNotification(
        4,
        'Security Alert',
        NotificationRole.ADMIN,
        'Multiple failed login attempts detected from IP 192.168.1.100. Please investigate.',
        _utc(2025, 10, 21, 9, 15),
        user_id='user-1',
    ),
    DemoNotification(
        5,
        'Editorial Meeting Tomorrow',
        NotificationRole.EDITOR,
        "Don't forget: editorial team meeting tomorrow at 10 AM in Conference Room B.",
        _utc(2025, 10, 21, 11, 45),
    ),
)


def seed_demo_data(session: Session) -> SeedSummary:
    """Insert the demo users and notifications that are not already stored."""

    users = 0
    for item in DEMO_USERS:
        if session.get(User, item.id) is not None:
            continue
        if session.exec(select(User).where(User.email == item.email)).first():
            continue
        session.add(User(id=item.id, email=item.email, name=item.name, role=item.role))
        users += 1

    notifications = 0
    for item in DEMO_NOTIFICATIONS:
        if session.get(Notification, item.id) is not None:
            continue
        session.add(
            Notification(
                id=item.id,
                user_id=item.user_id,
                title=item.title,
                role=item.role,
                message=item.message,
                created_at=item.created_at,
            )
        )
        notifications += 1

    session.commit()
    return SeedSummary(users=users, notifications=notifications)
