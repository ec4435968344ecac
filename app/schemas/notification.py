from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from app.models.enums import NotificationRole


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class NotificationCreate(CamelModel):
    # presence and role membership are checked by the service so that the
    # admin check always runs first
    title: Optional[str] = None
    message: Optional[str] = None
    role: Optional[str] = None
    user_id: Optional[str] = Field(default=None, alias='userId')
    current_user_role: Optional[str] = Field(default=None, alias='currentUserRole')


class NotificationDismiss(CamelModel):
    user_id: Optional[str] = Field(default=None, alias='userId')


class NotificationOut(CamelModel):
    id: int
    user_id: Optional[str] = Field(default=None, alias='userId')
    title: str
    role: NotificationRole
    message: str
    dismissed: list[str] = Field(default_factory=list)
    created_at: datetime = Field(alias='createdAt')


class NotificationListOut(BaseModel):
    notifications: list[NotificationOut]
    count: int


class NotificationCreatedOut(BaseModel):
    success: bool = True
    notification: NotificationOut


class NotificationDismissedOut(BaseModel):
    success: bool = True
    message: str
    notification: NotificationOut


class ErrorOut(BaseModel):
    error: str
    details: Optional[str] = None
