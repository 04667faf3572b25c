from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import VaultMembership


class IMembershipRepository(ABC):
    """Vault membership repository interface - application layer"""

    @abstractmethod
    async def get_by_user_and_vault(
        self, user_id: UUID, vault_id: UUID
    ) -> Optional[VaultMembership]:
        """Get membership by user and vault"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> List[VaultMembership]:
        """Get all memberships for a user"""
        pass

    @abstractmethod
    async def get_by_vault_id(self, vault_id: UUID) -> List[VaultMembership]:
        """Get all memberships for a vault"""
        pass

    @abstractmethod
    async def create(self, membership: VaultMembership) -> VaultMembership:
        """Create a new membership (raises IntegrityError on duplicates)"""
        pass

    @abstractmethod
    async def delete(self, vault_id: UUID, user_id: UUID) -> int:
        """Delete one membership, returning the number of removed rows"""
        pass

    @abstractmethod
    async def delete_by_vault_id(self, vault_id: UUID) -> int:
        """Delete every membership of a vault"""
        pass
