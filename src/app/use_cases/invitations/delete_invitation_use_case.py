"""
Delete Invitation Use Case

Recipient removes an invitation, pending or resolved, from their history.
"""

from uuid import UUID

from libs.result import Result, Return
from src.app.services.invitation_ledger import InvitationLedger
from src.app.services.notification_emitter import best_effort_notifications
from src.app.services.unit_of_work import UnitOfWork

from .dtos import DeleteInvitationResponse


class DeleteInvitationUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, invitation_id: UUID, user_id: UUID
    ) -> Result[DeleteInvitationResponse]:
        async with self.uow:
            result = await InvitationLedger(self.uow).delete(invitation_id, user_id)
            if result.is_err():
                return result

            await self.uow.commit()

            async with best_effort_notifications(
                self.uow, "delete invitation"
            ) as notifications:
                await notifications.delete_by_related_id(invitation_id)

            return Return.ok(
                DeleteInvitationResponse(
                    invitation_id=str(invitation_id), status="deleted"
                )
            )
