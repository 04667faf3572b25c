"""
List Invitations Use Case

Read-only views over the invitation ledger.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.invitation_ledger import InvitationLedger
from src.app.services.unit_of_work import UnitOfWork

from .dtos import InvitationInfo, InvitationListResponse, InvitationView


class ListInvitationsUseCase:
    """
    Views:
    - received: every invitation addressed to the user
    - pending: received invitations still awaiting an answer
    - sent: invitations the user sent
    - vault: pending invitations of one vault (members only)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: UUID,
        view: InvitationView = InvitationView.pending,
        vault_id: Optional[UUID] = None,
    ) -> Result[InvitationListResponse]:
        async with self.uow:
            ledger = InvitationLedger(self.uow)

            if view == InvitationView.vault:
                if vault_id is None:
                    return Return.err(Error("VAULT_NOT_FOUND", "Vault not found"))

                vault = await self.uow.vaults.get_by_id(vault_id)
                if vault is None:
                    return Return.err(Error("VAULT_NOT_FOUND", "Vault not found"))

                membership = await self.uow.memberships.get_by_user_and_vault(
                    user_id, vault_id
                )
                if membership is None:
                    return Return.err(
                        Error("FORBIDDEN", "You are not a member of this vault")
                    )

                invitations = await ledger.pending_for_vault(vault_id)
            elif view == InvitationView.sent:
                invitations = await ledger.sent_by(user_id)
            elif view == InvitationView.received:
                invitations = await ledger.received_by(user_id)
            else:
                invitations = await ledger.pending_for_user(user_id)

            return Return.ok(
                InvitationListResponse(
                    view=view,
                    invitations=[InvitationInfo.from_entity(i) for i in invitations],
                )
            )
