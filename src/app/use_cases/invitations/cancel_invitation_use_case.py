"""
Cancel Invitation Use Case

Sender or vault owner withdraws a pending invitation before it is resolved.
"""

from uuid import UUID

from libs.result import Result, Return
from src.app.services.invitation_ledger import InvitationLedger
from src.app.services.notification_emitter import best_effort_notifications
from src.app.services.unit_of_work import UnitOfWork

from .dtos import CancelInvitationResponse


class CancelInvitationUseCase:
    """
    Business Rules:
    - Only the sender or the vault owner may cancel
    - Only pending invitations can be cancelled; the row is removed
    - The recipient's invite notification is deleted afterwards (best effort)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, invitation_id: UUID, user_id: UUID
    ) -> Result[CancelInvitationResponse]:
        async with self.uow:
            result = await InvitationLedger(self.uow).cancel(invitation_id, user_id)
            if result.is_err():
                return result

            await self.uow.commit()

            async with best_effort_notifications(
                self.uow, "cancel invitation"
            ) as notifications:
                await notifications.delete_by_related_id(invitation_id)

            return Return.ok(
                CancelInvitationResponse(
                    invitation_id=str(invitation_id), status="cancelled"
                )
            )
