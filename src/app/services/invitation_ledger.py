"""
Invitation Ledger

Owns the invitation lifecycle: creation (including invitations addressed to
emails without an account), deferred linking, lookups and the terminal
transitions. Every mutation runs in the caller's unit of work; the caller
commits.

Transitions are conditional on status = 'pending' at the store level, so of
two racing requests on the same invitation exactly one affects a row.
"""

import logging
from typing import List
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Invitation, InvitationStatus, InvitationType

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _invalid_or_processed() -> Result:
    return Return.err(
        Error(
            "INVALID_OR_PROCESSED",
            "Invitation is no longer pending or is not addressed to you",
        )
    )


def _invitation_not_found() -> Result:
    return Return.err(Error("INVITATION_NOT_FOUND", "Invitation not found"))


class InvitationLedger:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def create(
        self, vault_id: UUID, sender_id: UUID, receiver_email: str
    ) -> Result[Invitation]:
        """
        Persist a pending vault invitation.

        Deduplication is keyed on (vault, receiver_email) and, once the
        recipient has an account, also on (vault, receiver_id). Both keys are
        backed by partial unique indexes; a concurrent duplicate that slips
        past the checks surfaces as DUPLICATE_INVITATION too.
        """
        vault = await self.uow.vaults.get_by_id(vault_id)
        if vault is None:
            return Return.err(Error("VAULT_NOT_FOUND", "Vault not found"))

        if vault.is_private:
            return Return.err(
                Error(
                    "PRIVATE_VAULT_NO_INVITES",
                    "Private vaults do not accept invitations",
                )
            )

        sender = await self.uow.users.get_by_id(sender_id)
        if sender is None:
            return Return.err(Error("USER_NOT_FOUND", "Sender not found"))

        email = normalize_email(receiver_email)
        receiver_id = None

        receiver = await self.uow.users.get_by_email(email)
        if receiver is not None:
            receiver_id = receiver.id

            membership = await self.uow.memberships.get_by_user_and_vault(
                receiver.id, vault_id
            )
            if membership is not None:
                return Return.err(
                    Error("ALREADY_MEMBER", "User is already a member of this vault")
                )

            pending = await self.uow.invitations.get_pending_by_target_and_receiver(
                vault_id, receiver.id
            )
            if pending is not None:
                return Return.err(
                    Error(
                        "DUPLICATE_INVITATION",
                        "A pending invitation already exists for this user",
                    )
                )

        pending = await self.uow.invitations.get_pending_by_target_and_email(
            vault_id, email
        )
        if pending is not None:
            return Return.err(
                Error(
                    "DUPLICATE_INVITATION",
                    "A pending invitation already exists for this email",
                )
            )

        invitation = Invitation(
            type=InvitationType.vault,
            target_id=vault.id,
            target_name=vault.name,
            sender_id=sender.id,
            receiver_id=receiver_id,
            receiver_email=email,
            status=InvitationStatus.pending,
        )

        try:
            invitation = await self.uow.invitations.create(invitation)
        except IntegrityError:
            await self.uow.rollback()
            # Either the vault was deleted meanwhile or a duplicate won the race
            if await self.uow.vaults.get_by_id(vault_id) is None:
                return Return.err(Error("VAULT_NOT_FOUND", "Vault not found"))
            logger.info(f"Concurrent duplicate invitation for {email} to vault {vault_id}")
            return Return.err(
                Error(
                    "DUPLICATE_INVITATION",
                    "A pending invitation already exists for this email",
                )
            )

        return Return.ok(invitation)

    async def link_by_email(self, email: str, new_user_id: UUID) -> int:
        """Attach unlinked pending invitations for email to a new account"""
        linked = await self.uow.invitations.link_pending_to_receiver(
            normalize_email(email), new_user_id
        )
        if linked:
            logger.info(f"Linked {linked} pending invitation(s) to user {new_user_id}")
        return linked

    async def pending_for_receiver(
        self, invitation_id: UUID, acting_user_id: UUID
    ) -> Result[Invitation]:
        invitation = await self.uow.invitations.get_by_id(invitation_id)
        if (
            invitation is None
            or invitation.receiver_id != acting_user_id
            or invitation.status != InvitationStatus.pending
        ):
            return _invalid_or_processed()
        return Return.ok(invitation)

    async def accept(
        self, invitation_id: UUID, acting_user_id: UUID
    ) -> Result[Invitation]:
        """Flip pending -> accepted; membership is the caller's business"""
        return await self._resolve(
            invitation_id, acting_user_id, InvitationStatus.accepted
        )

    async def decline(
        self, invitation_id: UUID, acting_user_id: UUID
    ) -> Result[Invitation]:
        return await self._resolve(
            invitation_id, acting_user_id, InvitationStatus.declined
        )

    async def _resolve(
        self, invitation_id: UUID, acting_user_id: UUID, to_status: InvitationStatus
    ) -> Result[Invitation]:
        checked = await self.pending_for_receiver(invitation_id, acting_user_id)
        if checked.is_err():
            return checked

        affected = await self.uow.invitations.transition_status(
            invitation_id,
            acting_user_id,
            from_status=InvitationStatus.pending,
            to_status=to_status,
        )
        if affected == 0:
            return _invalid_or_processed()

        invitation = checked.value
        invitation.status = to_status
        return Return.ok(invitation)

    async def cancel(
        self, invitation_id: UUID, acting_user_id: UUID
    ) -> Result[Invitation]:
        """Sender or vault owner withdraws a pending invitation"""
        invitation = await self.uow.invitations.get_by_id(invitation_id)
        if invitation is None:
            return _invitation_not_found()

        allowed = invitation.sender_id == acting_user_id
        if not allowed:
            vault = await self.uow.vaults.get_by_id(invitation.target_id)
            allowed = vault is not None and vault.owner_id == acting_user_id
        if not allowed:
            return Return.err(
                Error(
                    "FORBIDDEN",
                    "Only the sender or the vault owner can cancel an invitation",
                )
            )

        if invitation.status != InvitationStatus.pending:
            return _invalid_or_processed()

        affected = await self.uow.invitations.delete(
            invitation_id, only_status=InvitationStatus.pending
        )
        if affected == 0:
            return _invalid_or_processed()

        return Return.ok(invitation)

    async def delete(
        self, invitation_id: UUID, acting_user_id: UUID
    ) -> Result[Invitation]:
        """Recipient removes an invitation from their own history"""
        invitation = await self.uow.invitations.get_by_id(invitation_id)
        if invitation is None:
            return _invitation_not_found()

        if invitation.receiver_id != acting_user_id:
            return Return.err(
                Error("FORBIDDEN", "Only the recipient can delete an invitation")
            )

        affected = await self.uow.invitations.delete(invitation_id)
        if affected == 0:
            return _invitation_not_found()

        return Return.ok(invitation)

    async def pending_for_user(self, user_id: UUID) -> List[Invitation]:
        return await self.uow.invitations.get_by_receiver_id(
            user_id, status=InvitationStatus.pending
        )

    async def received_by(self, user_id: UUID) -> List[Invitation]:
        return await self.uow.invitations.get_by_receiver_id(user_id)

    async def sent_by(self, user_id: UUID) -> List[Invitation]:
        return await self.uow.invitations.get_by_sender_id(user_id)

    async def pending_for_vault(self, vault_id: UUID) -> List[Invitation]:
        return await self.uow.invitations.get_by_target_id(
            vault_id, status=InvitationStatus.pending
        )
