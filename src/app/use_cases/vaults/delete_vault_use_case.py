"""
Delete Vault Use Case

Owner-only. Removes the vault together with everything hanging off it:
notifications about its invitations and members, the invitations
themselves, vault-owned goals and memberships.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import VaultOwner

from .dtos import DeleteVaultResponse


class DeleteVaultUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, vault_id: UUID, acting_user_id: UUID
    ) -> Result[DeleteVaultResponse]:
        async with self.uow:
            vault = await self.uow.vaults.get_by_id(vault_id)
            if vault is None:
                return Return.err(Error("VAULT_NOT_FOUND", "Vault not found"))

            if vault.owner_id != acting_user_id:
                return Return.err(
                    Error("FORBIDDEN", "Only the vault owner can delete the vault")
                )

            invitations = await self.uow.invitations.get_by_target_id(vault_id)
            related_ids = [invitation.id for invitation in invitations]
            related_ids.append(vault_id)
            await self.uow.notifications.delete_by_related_ids(related_ids)

            invitations_deleted = await self.uow.invitations.delete_by_target_id(
                vault_id
            )
            await self.uow.goals.delete_by_owner(VaultOwner(id=vault_id))
            members_removed = await self.uow.memberships.delete_by_vault_id(vault_id)
            await self.uow.vaults.delete(vault_id)

            await self.uow.commit()

            return Return.ok(
                DeleteVaultResponse(
                    status="deleted",
                    invitations_deleted=invitations_deleted,
                    members_removed=members_removed,
                )
            )
