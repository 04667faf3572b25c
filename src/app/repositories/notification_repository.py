from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Notification


class INotificationRepository(ABC):
    """Notification repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, notification_id: UUID) -> Optional[Notification]:
        """Get notification by ID"""
        pass

    @abstractmethod
    async def get_by_user_id(
        self, user_id: UUID, unread_only: bool = False
    ) -> List[Notification]:
        """Get notifications for a user, newest first"""
        pass

    @abstractmethod
    async def count_unread(self, user_id: UUID) -> int:
        """Count unread notifications for a user"""
        pass

    @abstractmethod
    async def create(self, notification: Notification) -> Notification:
        """Create a new notification"""
        pass

    @abstractmethod
    async def mark_read(self, notification_id: UUID) -> int:
        """Mark one notification as read"""
        pass

    @abstractmethod
    async def mark_all_read(self, user_id: UUID) -> int:
        """Mark every unread notification of a user as read"""
        pass

    @abstractmethod
    async def mark_read_by_related_id(self, related_id: UUID, user_id: UUID) -> int:
        """Mark a user's unread notifications correlated with related_id as read"""
        pass

    @abstractmethod
    async def delete(self, notification_id: UUID) -> int:
        """Delete one notification"""
        pass

    @abstractmethod
    async def delete_by_related_ids(self, related_ids: List[UUID]) -> int:
        """Delete every notification correlated with any of related_ids"""
        pass
