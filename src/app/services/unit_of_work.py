from abc import ABC, abstractmethod

from src.app.repositories.goal_repository import IGoalRepository
from src.app.repositories.invitation_repository import IInvitationRepository
from src.app.repositories.membership_repository import IMembershipRepository
from src.app.repositories.notification_repository import INotificationRepository
from src.app.repositories.user_repository import IUserRepository
from src.app.repositories.vault_repository import IVaultRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    vaults: IVaultRepository
    memberships: IMembershipRepository
    invitations: IInvitationRepository
    notifications: INotificationRepository
    goals: IGoalRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
