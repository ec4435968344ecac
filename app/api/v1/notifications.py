from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session
from app.db.session import get_session
from app.schemas.notification import (
    ErrorOut,
    NotificationCreate,
    NotificationCreatedOut,
    NotificationDismiss,
    NotificationDismissedOut,
    NotificationListOut,
)
from app.services.notification_service import create_notification, dismiss, list_visible

router = APIRouter(prefix='/notifications', tags=['notifications'])

_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {'model': ErrorOut},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {'model': ErrorOut},
}


@router.get('', response_model=NotificationListOut, responses=_ERRORS)
def list_notifications_endpoint(
    user_id: Optional[str] = Query(default=None, alias='userId'),
    role: Optional[str] = None,
    session: Session = Depends(get_session),
) -> NotificationListOut:
    return list_visible(session, user_id, role)


@router.post(
    '',
    response_model=NotificationCreatedOut,
    status_code=status.HTTP_201_CREATED,
    responses={**_ERRORS, status.HTTP_403_FORBIDDEN: {'model': ErrorOut}},
)
def create_notification_endpoint(
    payload: NotificationCreate,
    session: Session = Depends(get_session),
) -> NotificationCreatedOut:
    record = create_notification(session, payload)
    return NotificationCreatedOut(notification=record)


@router.post(
    '/{notification_id}/dismiss',
    response_model=NotificationDismissedOut,
    responses={**_ERRORS, status.HTTP_404_NOT_FOUND: {'model': ErrorOut}},
)
def dismiss_notification_endpoint(
    notification_id: str,
    payload: NotificationDismiss,
    session: Session = Depends(get_session),
) -> NotificationDismissedOut:
    result = dismiss(session, notification_id, payload.user_id)
    message = (
        'Notification already dismissed'
        if result.already_dismissed
        else 'Notification dismissed successfully'
    )
    return NotificationDismissedOut(message=message, notification=result.notification)
