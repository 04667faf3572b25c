from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.goal_repository import GoalRepository
from src.adapter.repositories.invitation_repository import InvitationRepository
from src.adapter.repositories.membership_repository import MembershipRepository
from src.adapter.repositories.notification_repository import NotificationRepository
from src.adapter.repositories.user_repository import UserRepository
from src.adapter.repositories.vault_repository import VaultRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.vaults = VaultRepository(self.session)
        self.memberships = MembershipRepository(self.session)
        self.invitations = InvitationRepository(self.session)
        self.notifications = NotificationRepository(self.session)
        self.goals = GoalRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Anything not committed by the use case is discarded
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
