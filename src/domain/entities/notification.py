"""
Notification Entity

Append-only in-app notification log.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import NotificationType


class Notification(SQLModel, table=True):
    """
    Notification entity - a message shown to one user.

    related_id correlates the notification with the invitation that caused
    it, so resolving or cancelling the invitation can clean it up.
    """

    __tablename__ = "notifications"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    type: NotificationType = Field(nullable=False)
    message: str = Field(max_length=1024)
    link: Optional[str] = Field(default=None, max_length=1024)
    is_read: bool = Field(default=False)
    related_id: Optional[UUID] = Field(default=None, index=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_notification_user_read", "user_id", "is_read"),)
