"""
Notification Use Cases

The caller-facing inbox over the notification log.
"""

from .delete_notification_use_case import DeleteNotificationUseCase
from .dtos import (
    DeleteNotificationResponse,
    MarkAllNotificationsReadResponse,
    MarkNotificationReadResponse,
    NotificationInfo,
    NotificationListResponse,
)
from .list_notifications_use_case import ListNotificationsUseCase
from .mark_all_notifications_read_use_case import MarkAllNotificationsReadUseCase
from .mark_notification_read_use_case import MarkNotificationReadUseCase

__all__ = [
    "ListNotificationsUseCase",
    "MarkNotificationReadUseCase",
    "MarkAllNotificationsReadUseCase",
    "DeleteNotificationUseCase",
    "NotificationInfo",
    "NotificationListResponse",
    "MarkNotificationReadResponse",
    "MarkAllNotificationsReadResponse",
    "DeleteNotificationResponse",
]
