"""
Decline Invitation Use Case
"""

from uuid import UUID

from libs.result import Result, Return
from src.app.services.invitation_ledger import InvitationLedger
from src.app.services.notification_emitter import best_effort_notifications
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import InvitationStatus

from .dtos import DeclineInvitationResponse


class DeclineInvitationUseCase:
    """Recipient turns down a pending invitation; no membership change"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, invitation_id: UUID, user_id: UUID
    ) -> Result[DeclineInvitationResponse]:
        async with self.uow:
            result = await InvitationLedger(self.uow).decline(invitation_id, user_id)
            if result.is_err():
                return result

            await self.uow.commit()

            async with best_effort_notifications(
                self.uow, "decline invitation"
            ) as notifications:
                await notifications.mark_read_by_related_id(invitation_id, user_id)

            return Return.ok(
                DeclineInvitationResponse(
                    invitation_id=str(invitation_id),
                    status=InvitationStatus.declined.value,
                )
            )
