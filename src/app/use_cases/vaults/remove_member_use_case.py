"""
Remove Member Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_control import can_manage_vault_resources

from .dtos import RemoveMemberResponse


class RemoveMemberUseCase:
    """
    Use case for removing a member from a vault.

    Business Rules:
    - The owner can never be removed; only deleting the vault removes them
    - Only the owner can remove members, and only while they have full access
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, vault_id: UUID, user_id: UUID, acting_user_id: UUID
    ) -> Result[RemoveMemberResponse]:
        """
        Execute remove member use case.

        Args:
            vault_id: Vault to remove the member from
            user_id: Member being removed
            acting_user_id: User performing the removal

        Returns:
            Result with RemoveMemberResponse DTO, or Error
        """
        async with self.uow:
            vault = await self.uow.vaults.get_by_id(vault_id)
            if vault is None:
                return Return.err(Error("VAULT_NOT_FOUND", "Vault not found"))

            if user_id == vault.owner_id:
                return Return.err(
                    Error("FORBIDDEN", "The vault owner cannot be removed")
                )

            if acting_user_id != vault.owner_id:
                return Return.err(
                    Error("FORBIDDEN", "Only the vault owner can remove members")
                )

            owner = await self.uow.users.get_by_id(acting_user_id)
            if owner is None or not can_manage_vault_resources(owner, vault.owner_id):
                return Return.err(
                    Error(
                        "FORBIDDEN",
                        "Your access has expired. Renew your subscription to manage members",
                    )
                )

            membership = await self.uow.memberships.get_by_user_and_vault(
                user_id, vault_id
            )
            if membership is None:
                return Return.err(
                    Error("MEMBERSHIP_NOT_FOUND", "User is not a member of this vault")
                )

            await self.uow.memberships.delete(vault_id, user_id)
            await self.uow.commit()

            return Return.ok(RemoveMemberResponse(status="removed"))
