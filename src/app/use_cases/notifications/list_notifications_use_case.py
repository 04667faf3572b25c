from uuid import UUID

from libs.result import Result, Return
from src.app.services.notification_emitter import NotificationEmitter
from src.app.services.unit_of_work import UnitOfWork

from .dtos import NotificationInfo, NotificationListResponse


class ListNotificationsUseCase:
    """Newest-first inbox with the unread badge count"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, unread_only: bool = False
    ) -> Result[NotificationListResponse]:
        async with self.uow:
            emitter = NotificationEmitter(self.uow)
            notifications = await emitter.list_for(user_id, unread_only=unread_only)
            unread_count = await emitter.unread_count_for(user_id)

            return Return.ok(
                NotificationListResponse(
                    notifications=[NotificationInfo.from_entity(n) for n in notifications],
                    unread_count=unread_count,
                )
            )
