"""
Create Vault Use Case

Creates a vault and its owner membership in one commit.
"""

from typing import Optional
from uuid import UUID

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_control import can_create_vaults
from src.domain.entities import Vault, VaultMembership, VaultRole

from .dtos import VaultMemberInfo, VaultResponse


class CreateVaultUseCase:
    """
    Business Rules:
    - Only users with full access (active or trial) can create vaults
    - The creator becomes owner and holds the vault's single owner membership
    - Missing image falls back to the configured default
    """

    def __init__(
        self,
        uow: UnitOfWork,
        default_image_url: str = ApplicationConfig.DEFAULT_VAULT_IMAGE_URL,
    ):
        self.uow = uow
        self.default_image_url = default_image_url

    async def execute(
        self,
        owner_id: UUID,
        name: str,
        image_url: Optional[str] = None,
        is_private: bool = False,
    ) -> Result[VaultResponse]:
        async with self.uow:
            owner = await self.uow.users.get_by_id(owner_id)
            if owner is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if not can_create_vaults(owner):
                return Return.err(
                    Error(
                        "FORBIDDEN",
                        "Your access has expired. Renew your subscription to create vaults",
                    )
                )

            vault = Vault(
                name=name.strip(),
                image_url=image_url or self.default_image_url,
                owner_id=owner.id,
                is_private=is_private,
            )
            vault = await self.uow.vaults.create(vault)

            membership = VaultMembership(
                vault_id=vault.id, user_id=owner.id, role=VaultRole.owner
            )
            await self.uow.memberships.create(membership)

            await self.uow.commit()

            return Return.ok(
                VaultResponse(
                    id=str(vault.id),
                    name=vault.name,
                    image_url=vault.image_url,
                    owner_id=str(vault.owner_id),
                    is_private=vault.is_private,
                    created_at=vault.created_at.isoformat(),
                    members=[
                        VaultMemberInfo(
                            user_id=str(owner.id),
                            name=owner.name,
                            email=owner.email,
                            avatar_url=owner.avatar_url,
                            role=VaultRole.owner.value,
                        )
                    ],
                    can_access=True,
                )
            )
