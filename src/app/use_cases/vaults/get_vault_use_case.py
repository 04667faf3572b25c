"""
Get Vault Use Case
"""

from typing import List
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_control import can_access_vault
from src.domain.entities import User, Vault

from .dtos import VaultMemberInfo, VaultResponse


async def load_vault_members(uow: UnitOfWork, vault_id: UUID) -> List[VaultMemberInfo]:
    memberships = await uow.memberships.get_by_vault_id(vault_id)
    users = await uow.users.get_by_ids([m.user_id for m in memberships])
    users_by_id = {u.id: u for u in users}

    members = []
    for membership in memberships:
        user = users_by_id.get(membership.user_id)
        if user is None:
            continue
        members.append(
            VaultMemberInfo(
                user_id=str(user.id),
                name=user.name,
                email=user.email,
                avatar_url=user.avatar_url,
                role=membership.role.value,
            )
        )
    return members


def build_vault_response(
    vault: Vault, members: List[VaultMemberInfo], user: User
) -> VaultResponse:
    return VaultResponse(
        id=str(vault.id),
        name=vault.name,
        image_url=vault.image_url,
        owner_id=str(vault.owner_id),
        is_private=vault.is_private,
        created_at=vault.created_at.isoformat(),
        members=members,
        can_access=can_access_vault(user, vault.owner_id, is_member=True),
    )


class GetVaultUseCase:
    """
    Business Rules:
    - Non-members never see a vault
    - Other members always do, whatever their subscription
    - The owner needs full access to enter their own vault
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, vault_id: UUID, user_id: UUID) -> Result[VaultResponse]:
        async with self.uow:
            vault = await self.uow.vaults.get_by_id(vault_id)
            if vault is None:
                return Return.err(Error("VAULT_NOT_FOUND", "Vault not found"))

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            membership = await self.uow.memberships.get_by_user_and_vault(
                user_id, vault_id
            )
            if not can_access_vault(user, vault.owner_id, membership is not None):
                return Return.err(
                    Error("FORBIDDEN", "You do not have access to this vault")
                )

            members = await load_vault_members(self.uow, vault.id)
            return Return.ok(build_vault_response(vault, members, user))
