from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, func, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.notification_repository import INotificationRepository
from src.domain.entities import Notification


class NotificationRepository(INotificationRepository):
    """Notification repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, notification_id: UUID) -> Optional[Notification]:
        """Get notification by ID"""
        stmt = select(Notification).where(Notification.id == notification_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_user_id(
        self, user_id: UUID, unread_only: bool = False
    ) -> List[Notification]:
        """Get notifications for a user, newest first"""
        stmt = select(Notification).where(Notification.user_id == user_id)
        if unread_only:
            stmt = stmt.where(Notification.is_read.is_(False))
        stmt = stmt.order_by(Notification.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_unread(self, user_id: UUID) -> int:
        """Count unread notifications for a user"""
        stmt = select(func.count()).select_from(Notification).where(
            Notification.user_id == user_id, Notification.is_read.is_(False)
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, notification: Notification) -> Notification:
        """Create a new notification"""
        self.session.add(notification)
        await self.session.flush()
        await self.session.refresh(notification)
        return notification

    async def mark_read(self, notification_id: UUID) -> int:
        """Mark one notification as read"""
        stmt = (
            update(Notification)
            .where(Notification.id == notification_id)
            .values(is_read=True)
            .execution_options(synchronize_session="evaluate")
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def mark_all_read(self, user_id: UUID) -> int:
        """Mark every unread notification of a user as read"""
        stmt = (
            update(Notification)
            .where(Notification.user_id == user_id, Notification.is_read.is_(False))
            .values(is_read=True)
            .execution_options(synchronize_session="evaluate")
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def mark_read_by_related_id(self, related_id: UUID, user_id: UUID) -> int:
        """Mark a user's unread notifications correlated with related_id as read"""
        stmt = (
            update(Notification)
            .where(
                Notification.related_id == related_id,
                Notification.user_id == user_id,
                Notification.is_read.is_(False),
            )
            .values(is_read=True)
            .execution_options(synchronize_session="evaluate")
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def delete(self, notification_id: UUID) -> int:
        """Delete one notification"""
        stmt = (
            delete(Notification)
            .where(Notification.id == notification_id)
            .execution_options(synchronize_session="evaluate")
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def delete_by_related_ids(self, related_ids: List[UUID]) -> int:
        """Delete every notification correlated with any of related_ids"""
        if not related_ids:
            return 0
        stmt = (
            delete(Notification)
            .where(Notification.related_id.in_(related_ids))
            .execution_options(synchronize_session="evaluate")
        )
        result = await self.session.execute(stmt)
        return result.rowcount
