from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Vault


class IVaultRepository(ABC):
    """Vault repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, vault_id: UUID) -> Optional[Vault]:
        """Get vault by ID"""
        pass

    @abstractmethod
    async def get_by_ids(self, vault_ids: List[UUID]) -> List[Vault]:
        """Get vaults by a list of IDs"""
        pass

    @abstractmethod
    async def create(self, vault: Vault) -> Vault:
        """Create a new vault"""
        pass

    @abstractmethod
    async def update(self, vault: Vault) -> Vault:
        """Update existing vault"""
        pass

    @abstractmethod
    async def delete(self, vault_id: UUID) -> int:
        """Delete a vault, returning the number of removed rows"""
        pass
