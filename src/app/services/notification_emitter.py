"""
Notification Emitter

Append-only in-app notification log. Runs inside the caller's unit of work
and never commits; the caller decides whether a failure here matters.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Notification, NotificationType

logger = logging.getLogger(__name__)


class NotificationError(Exception):
    """Raised when the notification store cannot be read or written"""

    def __init__(self, message: str, reason: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.reason = reason


class NotificationEmitter:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def create(
        self,
        user_id: UUID,
        type: NotificationType,
        message: str,
        link: Optional[str] = None,
        related_id: Optional[UUID] = None,
    ) -> Notification:
        notification = Notification(
            user_id=user_id,
            type=type,
            message=message,
            link=link,
            related_id=related_id,
        )
        try:
            return await self.uow.notifications.create(notification)
        except SQLAlchemyError as exc:
            raise NotificationError("Failed to create notification", str(exc)) from exc

    async def create_member_added(
        self, user_id: UUID, member_name: str, vault_id: UUID, vault_name: str
    ) -> Notification:
        return await self.create(
            user_id=user_id,
            type=NotificationType.vault_member_added,
            message=f'{member_name} joined the vault "{vault_name}"',
            link=f"/vaults/{vault_id}",
            related_id=vault_id,
        )

    async def list_for(
        self, user_id: UUID, unread_only: bool = False
    ) -> List[Notification]:
        try:
            return await self.uow.notifications.get_by_user_id(
                user_id, unread_only=unread_only
            )
        except SQLAlchemyError as exc:
            raise NotificationError("Failed to load notifications", str(exc)) from exc

    async def unread_count_for(self, user_id: UUID) -> int:
        try:
            return await self.uow.notifications.count_unread(user_id)
        except SQLAlchemyError as exc:
            raise NotificationError("Failed to count notifications", str(exc)) from exc

    async def mark_read(self, notification_id: UUID) -> None:
        try:
            await self.uow.notifications.mark_read(notification_id)
        except SQLAlchemyError as exc:
            raise NotificationError("Failed to mark notification read", str(exc)) from exc

    async def mark_all_read(self, user_id: UUID) -> int:
        try:
            return await self.uow.notifications.mark_all_read(user_id)
        except SQLAlchemyError as exc:
            raise NotificationError("Failed to mark notifications read", str(exc)) from exc

    async def mark_read_by_related_id(self, related_id: UUID, user_id: UUID) -> int:
        """Mark the user's notifications about related_id as read (idempotent)"""
        try:
            return await self.uow.notifications.mark_read_by_related_id(
                related_id, user_id
            )
        except SQLAlchemyError as exc:
            raise NotificationError("Failed to mark notifications read", str(exc)) from exc

    async def delete(self, notification_id: UUID) -> None:
        try:
            await self.uow.notifications.delete(notification_id)
        except SQLAlchemyError as exc:
            raise NotificationError("Failed to delete notification", str(exc)) from exc

    async def delete_by_related_id(self, related_id: UUID) -> int:
        try:
            return await self.uow.notifications.delete_by_related_ids([related_id])
        except SQLAlchemyError as exc:
            raise NotificationError("Failed to delete notifications", str(exc)) from exc


@asynccontextmanager
async def best_effort_notifications(
    uow: UnitOfWork, action: str
) -> AsyncIterator[NotificationEmitter]:
    """
    Run notification work after the main commit.

    Commits on success. On failure only the notification work is rolled
    back and the error is logged; it never reaches the caller.
    """
    try:
        yield NotificationEmitter(uow)
        await uow.commit()
    except (NotificationError, SQLAlchemyError) as exc:
        await uow.rollback()
        logger.warning(f"Notification side effect failed ({action}): {exc}")
