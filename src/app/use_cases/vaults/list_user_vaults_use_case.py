"""
List User Vaults Use Case

Vaults the user belongs to, owned or joined, oldest first. Each carries a
can_access flag so a client can show a lapsed owner's vault as locked.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import VaultListResponse
from .get_vault_use_case import build_vault_response, load_vault_members


class ListUserVaultsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[VaultListResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            memberships = await self.uow.memberships.get_by_user_id(user_id)
            vaults = await self.uow.vaults.get_by_ids(
                [m.vault_id for m in memberships]
            )

            responses = []
            for vault in sorted(vaults, key=lambda v: v.created_at):
                members = await load_vault_members(self.uow, vault.id)
                responses.append(build_vault_response(vault, members, user))

            return Return.ok(VaultListResponse(vaults=responses))
