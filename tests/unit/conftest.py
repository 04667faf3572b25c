import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Repositories: every method is awaitable
    uow.users = AsyncMock()
    uow.vaults = AsyncMock()
    uow.memberships = AsyncMock()
    uow.invitations = AsyncMock()
    uow.notifications = AsyncMock()
    uow.goals = AsyncMock()

    # Lookups default to "nothing found"
    uow.users.get_by_email.return_value = None
    uow.memberships.get_by_user_and_vault.return_value = None
    uow.invitations.get_pending_by_target_and_email.return_value = None
    uow.invitations.get_pending_by_target_and_receiver.return_value = None

    # Writes echo the entity back, as the real repositories do
    uow.users.create.side_effect = lambda entity: entity
    uow.vaults.create.side_effect = lambda entity: entity
    uow.vaults.update.side_effect = lambda entity: entity
    uow.memberships.create.side_effect = lambda entity: entity
    uow.invitations.create.side_effect = lambda entity: entity
    uow.notifications.create.side_effect = lambda entity: entity
    return uow
