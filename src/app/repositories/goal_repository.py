from abc import ABC, abstractmethod
from typing import List

from src.domain.entities import Goal, Owner


class IGoalRepository(ABC):
    """Goal repository interface - ownership queries only"""

    @abstractmethod
    async def get_by_owner(self, owner: Owner) -> List[Goal]:
        """Get goals belonging to an owner"""
        pass

    @abstractmethod
    async def create(self, goal: Goal) -> Goal:
        """Create a new goal"""
        pass

    @abstractmethod
    async def delete_by_owner(self, owner: Owner) -> int:
        """Delete every goal belonging to an owner"""
        pass
