from uuid import UUID

from libs.result import Result, Return
from src.app.services.notification_emitter import NotificationEmitter
from src.app.services.unit_of_work import UnitOfWork

from .dtos import MarkAllNotificationsReadResponse


class MarkAllNotificationsReadUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[MarkAllNotificationsReadResponse]:
        async with self.uow:
            updated = await NotificationEmitter(self.uow).mark_all_read(user_id)
            await self.uow.commit()

            return Return.ok(MarkAllNotificationsReadResponse(updated=updated))
