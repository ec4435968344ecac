from dataclasses import dataclass, field
from itertools import product
from typing import Optional

import pytest

from app.models.enums import NotificationRole
from app.services.visibility import audience_matches, is_visible, role_matches

ROLES = ['admin', 'editor', 'user', 'all']
VIEWER_ROLES = ['admin', 'editor', 'user']


@dataclass
class Record:
    role: NotificationRole
    user_id: Optional[str] = None
    dismissed: list[str] = field(default_factory=list)


def _expected(record: Record, viewer_id: str, viewer_role: str) -> bool:
    return (
        (record.role.value == viewer_role or record.role.value == 'all')
        and (record.user_id is None or record.user_id == viewer_id)
        and viewer_id not in record.dismissed
    )


@pytest.mark.parametrize(
    'role,user_id,dismissed',
    list(product(ROLES, [None, 'u1', 'u2'], [[], ['u1'], ['u2'], ['u1', 'u2']])),
)
def test_is_visible_matches_rule(role, user_id, dismissed):
    record = Record(role=NotificationRole(role), user_id=user_id, dismissed=dismissed)
    for viewer_id, viewer_role in product(['u1', 'u2'], VIEWER_ROLES):
        assert is_visible(record, viewer_id, viewer_role) is _expected(record, viewer_id, viewer_role)


def test_admin_broadcast_visible_only_to_admins():
    record = Record(role=NotificationRole.ADMIN)
    assert is_visible(record, 'x', 'admin')
    assert not is_visible(record, 'x', 'editor')
    assert not is_visible(record, 'y', 'user')


def test_all_broadcast_visible_to_every_role():
    record = Record(role=NotificationRole.ALL)
    assert all(is_visible(record, 'anyone', role) for role in VIEWER_ROLES)


def test_targeted_notification_only_for_its_user():
    record = Record(role=NotificationRole.ADMIN, user_id='u1')
    assert is_visible(record, 'u1', 'admin')
    assert not is_visible(record, 'u2', 'admin')
    assert not is_visible(record, 'u1', 'editor')


def test_role_match_is_exact():
    assert role_matches('admin', 'admin')
    assert role_matches(NotificationRole.ALL, 'editor')
    assert not role_matches('admin', 'Admin')
    assert not role_matches('admin', 'admins')


def test_audience_match():
    assert audience_matches(None, 'u1')
    assert audience_matches('u1', 'u1')
    assert not audience_matches('u1', 'u2')
