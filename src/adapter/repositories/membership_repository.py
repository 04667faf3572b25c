from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.membership_repository import IMembershipRepository
from src.domain.entities import VaultMembership


class MembershipRepository(IMembershipRepository):
    """Vault membership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_and_vault(
        self, user_id: UUID, vault_id: UUID
    ) -> Optional[VaultMembership]:
        """Get membership by user and vault"""
        stmt = select(VaultMembership).where(
            VaultMembership.user_id == user_id, VaultMembership.vault_id == vault_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_user_id(self, user_id: UUID) -> List[VaultMembership]:
        """Get all memberships for a user"""
        stmt = select(VaultMembership).where(VaultMembership.user_id == user_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_vault_id(self, vault_id: UUID) -> List[VaultMembership]:
        """Get all memberships for a vault"""
        stmt = (
            select(VaultMembership)
            .where(VaultMembership.vault_id == vault_id)
            .order_by(VaultMembership.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, membership: VaultMembership) -> VaultMembership:
        """Create a new membership"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

    async def delete(self, vault_id: UUID, user_id: UUID) -> int:
        """Delete one membership"""
        stmt = (
            delete(VaultMembership)
            .where(
                VaultMembership.vault_id == vault_id,
                VaultMembership.user_id == user_id,
            )
            .execution_options(synchronize_session="evaluate")
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def delete_by_vault_id(self, vault_id: UUID) -> int:
        """Delete every membership of a vault"""
        stmt = (
            delete(VaultMembership)
            .where(VaultMembership.vault_id == vault_id)
            .execution_options(synchronize_session="evaluate")
        )
        result = await self.session.execute(stmt)
        return result.rowcount
