"""
Notification Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Notification


class NotificationInfo(BaseModel):
    id: str
    type: str
    message: str
    link: Optional[str]
    is_read: bool
    related_id: Optional[str]
    created_at: str

    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationInfo":
        return cls(
            id=str(notification.id),
            type=notification.type.value,
            message=notification.message,
            link=notification.link,
            is_read=notification.is_read,
            related_id=str(notification.related_id) if notification.related_id else None,
            created_at=notification.created_at.isoformat(),
        )


class NotificationListResponse(BaseModel):
    notifications: List[NotificationInfo]
    unread_count: int


class MarkNotificationReadResponse(BaseModel):
    notification_id: str
    is_read: bool


class MarkAllNotificationsReadResponse(BaseModel):
    updated: int


class DeleteNotificationResponse(BaseModel):
    notification_id: str
    status: str
