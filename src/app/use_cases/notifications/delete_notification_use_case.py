from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.notification_emitter import NotificationEmitter
from src.app.services.unit_of_work import UnitOfWork

from .dtos import DeleteNotificationResponse


class DeleteNotificationUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, notification_id: UUID, user_id: UUID
    ) -> Result[DeleteNotificationResponse]:
        async with self.uow:
            notification = await self.uow.notifications.get_by_id(notification_id)
            if notification is None or notification.user_id != user_id:
                return Return.err(
                    Error("NOTIFICATION_NOT_FOUND", "Notification not found")
                )

            await NotificationEmitter(self.uow).delete(notification_id)
            await self.uow.commit()

            return Return.ok(
                DeleteNotificationResponse(
                    notification_id=str(notification_id), status="deleted"
                )
            )
