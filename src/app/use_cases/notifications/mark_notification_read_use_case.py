from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.notification_emitter import NotificationEmitter
from src.app.services.unit_of_work import UnitOfWork

from .dtos import MarkNotificationReadResponse


class MarkNotificationReadUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, notification_id: UUID, user_id: UUID
    ) -> Result[MarkNotificationReadResponse]:
        async with self.uow:
            notification = await self.uow.notifications.get_by_id(notification_id)
            # Someone else's notification is reported as missing
            if notification is None or notification.user_id != user_id:
                return Return.err(
                    Error("NOTIFICATION_NOT_FOUND", "Notification not found")
                )

            await NotificationEmitter(self.uow).mark_read(notification_id)
            await self.uow.commit()

            return Return.ok(
                MarkNotificationReadResponse(
                    notification_id=str(notification_id), is_read=True
                )
            )
