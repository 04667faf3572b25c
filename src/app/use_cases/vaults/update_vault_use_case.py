"""
Update Vault Use Case

Owner edits a vault's name, image or privacy. Invitations already sent keep
the vault name they were created with.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_control import can_manage_vault_resources
from src.domain.base import utcnow

from .dtos import VaultResponse
from .get_vault_use_case import build_vault_response, load_vault_members


class UpdateVaultUseCase:
    """
    Business Rules:
    - Only the owner can edit a vault, and only while they have full access
    - Omitted fields are left unchanged
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        vault_id: UUID,
        acting_user_id: UUID,
        name: Optional[str] = None,
        image_url: Optional[str] = None,
        is_private: Optional[bool] = None,
    ) -> Result[VaultResponse]:
        async with self.uow:
            vault = await self.uow.vaults.get_by_id(vault_id)
            if vault is None:
                return Return.err(Error("VAULT_NOT_FOUND", "Vault not found"))

            if vault.owner_id != acting_user_id:
                return Return.err(
                    Error("FORBIDDEN", "Only the vault owner can edit the vault")
                )

            owner = await self.uow.users.get_by_id(acting_user_id)
            if owner is None or not can_manage_vault_resources(owner, vault.owner_id):
                return Return.err(
                    Error(
                        "FORBIDDEN",
                        "Your access has expired. Renew your subscription to edit this vault",
                    )
                )

            if name is not None:
                vault.name = name.strip()
            if image_url is not None:
                vault.image_url = image_url
            if is_private is not None:
                vault.is_private = is_private
            vault.updated_at = utcnow()

            vault = await self.uow.vaults.update(vault)
            members = await load_vault_members(self.uow, vault.id)
            response = build_vault_response(vault, members, owner)

            await self.uow.commit()

            return Return.ok(response)
