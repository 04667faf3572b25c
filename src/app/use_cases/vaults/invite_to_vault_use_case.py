"""
Invite to Vault Use Case

Handles inviting an email address to join a vault.
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.email_sender import IEmailSender
from src.app.services.email_templates import render_vault_invite_email
from src.app.services.invitation_ledger import InvitationLedger
from src.app.services.notification_emitter import best_effort_notifications
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.invitations.dtos import InvitationInfo
from src.domain.access_control import can_manage_vault_resources
from src.domain.entities import NotificationType

from .dtos import InviteToVaultResponse

logger = logging.getLogger(__name__)


class InviteToVaultUseCase:
    """
    Use case for inviting someone to a vault.

    Business Rules:
    - Only vault members can invite
    - An owner whose access has lapsed cannot invite into their own vault;
      other members can
    - Private vaults never accept invitations
    - At most one pending invitation per (vault, email) and per (vault, user)
    - A registered recipient gets a vault_invite notification
    - The invitation email is sent after commit; delivery failure never
      undoes the invitation
    """

    def __init__(
        self,
        uow: UnitOfWork,
        email_sender: Optional[IEmailSender] = None,
        app_base_url: str = "",
    ):
        self.uow = uow
        self.email_sender = email_sender
        self.app_base_url = app_base_url.rstrip("/")

    async def execute(
        self, vault_id: UUID, sender_id: UUID, receiver_email: str
    ) -> Result[InviteToVaultResponse]:
        """
        Execute invite to vault use case.

        Args:
            vault_id: Target vault ID
            sender_id: User sending the invitation
            receiver_email: Email address to invite (may have no account yet)

        Returns:
            Result with InviteToVaultResponse DTO, or Error
        """
        async with self.uow:
            vault = await self.uow.vaults.get_by_id(vault_id)
            if vault is None:
                return Return.err(Error("VAULT_NOT_FOUND", "Vault not found"))

            sender = await self.uow.users.get_by_id(sender_id)
            if sender is None:
                return Return.err(Error("USER_NOT_FOUND", "Sender not found"))

            sender_membership = await self.uow.memberships.get_by_user_and_vault(
                sender_id, vault_id
            )
            if sender_membership is None:
                return Return.err(
                    Error("FORBIDDEN", "Only vault members can send invitations")
                )

            if not can_manage_vault_resources(sender, vault.owner_id):
                return Return.err(
                    Error(
                        "FORBIDDEN",
                        "Your access has expired. Renew your subscription to invite members",
                    )
                )

            result = await InvitationLedger(self.uow).create(
                vault_id, sender_id, receiver_email
            )
            if result.is_err():
                return result

            invitation = result.value
            await self.uow.commit()

            # Captured before the best-effort step, which may roll back and
            # expire the session's objects
            invitation_info = InvitationInfo.from_entity(invitation)
            sender_name = sender.name
            vault_name = vault.name

            if invitation.receiver_id is not None:
                async with best_effort_notifications(
                    self.uow, "vault invite"
                ) as notifications:
                    await notifications.create(
                        user_id=invitation.receiver_id,
                        type=NotificationType.vault_invite,
                        message=f'{sender_name} invited you to the vault "{vault_name}"',
                        link="/invitations",
                        related_id=invitation.id,
                    )

            email_sent = await self._send_invite_email(
                invitation_info.receiver_email, sender_name, vault_name
            )

            return Return.ok(
                InviteToVaultResponse(invitation=invitation_info, email_sent=email_sent)
            )

    async def _send_invite_email(
        self, to: str, inviter_name: str, vault_name: str
    ) -> bool:
        if self.email_sender is None:
            return False

        email = render_vault_invite_email(
            inviter_name=inviter_name,
            vault_name=vault_name,
            invite_link=f"{self.app_base_url}/invitations",
        )
        sent = await self.email_sender.send_email(
            to=to, subject=email.subject, html=email.html, text=email.text
        )
        if not sent:
            logger.warning(f"Invitation email to {to} was not delivered")
        return sent
