from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.vault_repository import IVaultRepository
from src.domain.entities import Vault


class VaultRepository(IVaultRepository):
    """Vault repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, vault_id: UUID) -> Optional[Vault]:
        """Get vault by ID"""
        stmt = select(Vault).where(Vault.id == vault_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_ids(self, vault_ids: List[UUID]) -> List[Vault]:
        """Get vaults by a list of IDs"""
        if not vault_ids:
            return []
        stmt = select(Vault).where(Vault.id.in_(vault_ids)).order_by(Vault.created_at)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, vault: Vault) -> Vault:
        """Create a new vault"""
        self.session.add(vault)
        await self.session.flush()
        await self.session.refresh(vault)
        return vault

    async def update(self, vault: Vault) -> Vault:
        """Update existing vault"""
        self.session.add(vault)
        await self.session.flush()
        await self.session.refresh(vault)
        return vault

    async def delete(self, vault_id: UUID) -> int:
        """Delete a vault, returning the number of removed rows"""
        stmt = delete(Vault).where(Vault.id == vault_id).execution_options(
            synchronize_session="evaluate"
        )
        result = await self.session.execute(stmt)
        return result.rowcount
