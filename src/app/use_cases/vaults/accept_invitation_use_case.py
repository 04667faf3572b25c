"""
Accept Invitation Use Case

Turns a pending invitation into a vault membership.
"""

from uuid import UUID

from sqlalchemy.exc import IntegrityError

from libs.result import Error, Result, Return
from src.app.services.invitation_ledger import InvitationLedger
from src.app.services.notification_emitter import best_effort_notifications
from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_control import can_accept_invitations
from src.domain.entities import InvitationStatus, VaultMembership, VaultRole

from .dtos import AcceptInvitationResponse


class AcceptInvitationUseCase:
    """
    Use case for accepting a vault invitation.

    Membership insert and status flip commit together or not at all; on any
    failure the invitation stays pending and no membership exists.

    Business Rules:
    - Only the recipient of a pending invitation can accept it
    - Subscription status never blocks accepting
    - The vault must still exist
    - An existing membership yields ALREADY_MEMBER
    - Losing a race against another accept/decline/cancel yields
      INVALID_OR_PROCESSED
    - Afterwards (best effort): the recipient's invite notification is marked
      read and the sender is told the member joined
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, invitation_id: UUID, user_id: UUID
    ) -> Result[AcceptInvitationResponse]:
        async with self.uow:
            ledger = InvitationLedger(self.uow)

            checked = await ledger.pending_for_receiver(invitation_id, user_id)
            if checked.is_err():
                return checked

            invitation = checked.value
            vault_id = invitation.target_id
            sender_id = invitation.sender_id

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))
            if not can_accept_invitations(user):
                return Return.err(Error("FORBIDDEN", "You cannot accept invitations"))
            member_name = user.name

            vault = await self.uow.vaults.get_by_id(vault_id)
            if vault is None:
                return Return.err(Error("VAULT_NOT_FOUND", "Vault not found"))
            vault_name = vault.name

            # Status flips before the insert; a concurrent accept loses here
            accepted = await ledger.accept(invitation_id, user_id)
            if accepted.is_err():
                await self.uow.rollback()
                return accepted

            try:
                await self.uow.memberships.create(
                    VaultMembership(
                        vault_id=vault_id, user_id=user_id, role=VaultRole.member
                    )
                )
            except IntegrityError:
                await self.uow.rollback()
                # The vault may have been deleted under us
                if await self.uow.vaults.get_by_id(vault_id) is None:
                    return Return.err(Error("VAULT_NOT_FOUND", "Vault not found"))
                return Return.err(
                    Error("ALREADY_MEMBER", "You are already a member of this vault")
                )

            await self.uow.commit()

            async with best_effort_notifications(
                self.uow, "accept invitation"
            ) as notifications:
                await notifications.mark_read_by_related_id(invitation_id, user_id)
                await notifications.create_member_added(
                    user_id=sender_id,
                    member_name=member_name,
                    vault_id=vault_id,
                    vault_name=vault_name,
                )

            return Return.ok(
                AcceptInvitationResponse(
                    invitation_id=str(invitation_id),
                    vault_id=str(vault_id),
                    status=InvitationStatus.accepted.value,
                    role=VaultRole.member.value,
                )
            )
