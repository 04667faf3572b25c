from typing import List

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.goal_repository import IGoalRepository
from src.domain.entities import Goal, Owner
from src.domain.entities.owner import owner_to_columns


class GoalRepository(IGoalRepository):
    """Goal repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_owner(self, owner: Owner) -> List[Goal]:
        """Get goals belonging to an owner"""
        owner_type, owner_id = owner_to_columns(owner)
        stmt = select(Goal).where(Goal.owner_type == owner_type, Goal.owner_id == owner_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, goal: Goal) -> Goal:
        """Create a new goal"""
        self.session.add(goal)
        await self.session.flush()
        await self.session.refresh(goal)
        return goal

    async def delete_by_owner(self, owner: Owner) -> int:
        """Delete every goal belonging to an owner"""
        owner_type, owner_id = owner_to_columns(owner)
        stmt = (
            delete(Goal)
            .where(Goal.owner_type == owner_type, Goal.owner_id == owner_id)
            .execution_options(synchronize_session="evaluate")
        )
        result = await self.session.execute(stmt)
        return result.rowcount
