"""Client-side state for the notification bell and its slide-out panel.

Each :class:`NotificationPanel` owns its own state (open flag, cached list,
current view) for the lifetime between :meth:`mount` and :meth:`unmount`.
While mounted it re-fetches the list on a timer; a failed background fetch
keeps whatever was shown before, while a failed explicit load switches the
panel to its error view.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Optional

import requests
from loguru import logger

from app.core.config import settings


class PanelView(str, Enum):
    LOADING = 'loading'
    ERROR = 'error'
    EMPTY = 'empty'
    LIST = 'list'


class PanelError(RuntimeError):
    pass


@dataclass
class PanelNotification:
    id: int
    title: str
    role: str
    message: str
    created_at: datetime
    user_id: Optional[str] = None
    dismissed: list[str] = field(default_factory=list)

    @property
    def is_specific(self) -> bool:
        return self.user_id is not None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> 'PanelNotification':
        return cls(
            id=int(payload['id']),
            title=payload['title'],
            role=payload['role'],
            message=payload['message'],
            created_at=parse_timestamp(payload['createdAt']),
            user_id=payload.get('userId'),
            dismissed=list(payload.get('dismissed') or []),
        )


def parse_timestamp(raw: str) -> datetime:
    value = datetime.fromisoformat(raw.replace('Z', '+00:00'))
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def _now() -> datetime:
    return datetime.now(timezone.utc)


def is_new(created_at: datetime, now: Optional[datetime] = None, window_hours: Optional[int] = None) -> bool:
    now = now or _now()
    hours = settings.PANEL_NEW_WINDOW_HOURS if window_hours is None else window_hours
    return now - created_at < timedelta(hours=hours)


def format_timestamp(created_at: datetime, now: Optional[datetime] = None) -> str:
    now = now or _now()
    seconds = (now - created_at).total_seconds()
    minutes = int(seconds // 60)
    hours = int(seconds // 3600)
    days = int(seconds // 86400)
    if minutes < 1:
        return 'Just now'
    if minutes < 60:
        return f'{minutes}m ago'
    if hours < 24:
        return f'{hours}h ago'
    if days < 7:
        return f'{days}d ago'
    label = f'{created_at:%b} {created_at.day}'
    if created_at.year != now.year:
        label = f'{label}, {created_at.year}'
    return label


def badge_text(count: int, limit: Optional[int] = None) -> str:
    limit = settings.PANEL_BADGE_MAX if limit is None else limit
    return f'{limit}+' if count > limit else str(count)


class NotificationPanel:
    def __init__(
        self,
        base_url: str,
        user_id: str,
        user_role: str,
        http: Any = None,
        poll_interval: Optional[float] = None,
        api_prefix: Optional[str] = None,
    ) -> None:
        if not user_id or not user_role:
            raise ValueError('NotificationPanel: user_id and user_role are required')
        self.base_url = base_url.rstrip('/')
        self.api_prefix = settings.API_V1_PREFIX if api_prefix is None else api_prefix
        self.user_id = user_id
        self.user_role = user_role
        self.http = http if http is not None else requests.Session()
        self.poll_interval = settings.PANEL_POLL_INTERVAL_SECONDS if poll_interval is None else poll_interval

        self.is_open = False
        self.view = PanelView.LOADING
        self.notifications: list[PanelNotification] = []
        self.count = 0

        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._poller: Optional[threading.Thread] = None

    @property
    def notifications_url(self) -> str:
        return f'{self.base_url}{self.api_prefix}/notifications'

    @property
    def badge_text(self) -> str:
        return badge_text(self.count)

    @property
    def aria_label(self) -> str:
        if self.count > 0:
            return f'Open notifications ({self.count} unread)'
        return 'Open notifications'

    @property
    def is_mounted(self) -> bool:
        return self._poller is not None and self._poller.is_alive()

    def mount(self) -> None:
        self.load()
        if self.poll_interval <= 0 or self.is_mounted:
            return
        self._stop.clear()
        self._poller = threading.Thread(target=self._poll, name='notification-panel-poll', daemon=True)
        self._poller.start()

    def unmount(self) -> None:
        self._stop.set()
        if self._poller is not None:
            self._poller.join(timeout=5)
            self._poller = None
        with self._lock:
            self.is_open = False
            self.notifications = []
            self.count = 0
            self.view = PanelView.LOADING

    def open(self) -> None:
        self.is_open = True

    def close(self) -> None:
        self.is_open = False

    def toggle(self) -> None:
        if self.is_open:
            self.close()
        else:
            self.open()

    def load(self, silent: bool = False) -> bool:
        """Fetch the visible list; returns False when the fetch failed."""
        if not silent:
            with self._lock:
                self.view = PanelView.LOADING
        try:
            response = self.http.get(
                self.notifications_url,
                params={'userId': self.user_id, 'role': self.user_role},
            )
            data = self._json_or_raise(response, 'Failed to fetch notifications')
            items = [PanelNotification.from_payload(item) for item in data['notifications']]
            count = int(data['count'])
        except (requests.RequestException, PanelError, KeyError, TypeError, ValueError) as exc:
            logger.warning('panel.load_failed', user_id=self.user_id, silent=silent, error=str(exc))
            if not silent:
                with self._lock:
                    self.view = PanelView.ERROR
            return False

        with self._lock:
            self.notifications = items
            self.count = count
            self.view = PanelView.LIST if items else PanelView.EMPTY
        return True

    def dismiss(self, notification_id: int) -> None:
        try:
            response = self.http.post(
                f'{self.notifications_url}/{notification_id}/dismiss',
                json={'userId': self.user_id},
            )
            self._json_or_raise(response, 'Failed to dismiss notification')
        except (requests.RequestException, ValueError) as exc:
            logger.warning('panel.dismiss_failed', notification_id=notification_id, error=str(exc))
            raise PanelError('Failed to dismiss notification') from exc

        with self._lock:
            self.notifications = [item for item in self.notifications if item.id != notification_id]
            self.count = len(self.notifications)
            self.view = PanelView.LIST if self.notifications else PanelView.EMPTY

    def _poll(self) -> None:
        while not self._stop.wait(self.poll_interval):
            self.load(silent=True)

    @staticmethod
    def _json_or_raise(response: Any, message: str) -> dict[str, Any]:
        if response.status_code >= 400:
            try:
                detail = response.json().get('error')
            except ValueError:
                detail = None
            raise PanelError(f'{message}: {detail or response.status_code}')
        return response.json()
