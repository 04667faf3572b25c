from uuid import uuid4

import pytest

from src.app.use_cases.vaults import DeleteVaultUseCase
from src.domain.entities import SubscriptionStatus, VaultOwner
from tests.fixtures.factories import make_invitation, make_user, make_vault


@pytest.mark.asyncio
async def test_owner_deletes_vault_and_dependents(mock_uow):
    owner = make_user()
    vault = make_vault(owner)
    invitations = [make_invitation(vault, owner), make_invitation(vault, owner)]
    mock_uow.vaults.get_by_id.return_value = vault
    mock_uow.invitations.get_by_target_id.return_value = invitations
    mock_uow.invitations.delete_by_target_id.return_value = 2
    mock_uow.memberships.delete_by_vault_id.return_value = 3

    result = await DeleteVaultUseCase(mock_uow).execute(vault.id, owner.id)

    assert result.is_ok()
    assert result.value.invitations_deleted == 2
    assert result.value.members_removed == 3
    mock_uow.notifications.delete_by_related_ids.assert_awaited_once_with(
        [invitations[0].id, invitations[1].id, vault.id]
    )
    mock_uow.goals.delete_by_owner.assert_awaited_once_with(VaultOwner(id=vault.id))
    mock_uow.vaults.delete.assert_awaited_once_with(vault.id)
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_lapsed_owner_can_still_delete(mock_uow):
    owner = make_user(subscription_status=SubscriptionStatus.inactive)
    vault = make_vault(owner)
    mock_uow.vaults.get_by_id.return_value = vault
    mock_uow.invitations.get_by_target_id.return_value = []

    result = await DeleteVaultUseCase(mock_uow).execute(vault.id, owner.id)

    assert result.is_ok()


@pytest.mark.asyncio
async def test_non_owner_cannot_delete(mock_uow):
    vault = make_vault(make_user())
    mock_uow.vaults.get_by_id.return_value = vault

    result = await DeleteVaultUseCase(mock_uow).execute(vault.id, uuid4())

    assert result.error.code == "FORBIDDEN"
    mock_uow.vaults.delete.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_missing_vault(mock_uow):
    mock_uow.vaults.get_by_id.return_value = None

    result = await DeleteVaultUseCase(mock_uow).execute(uuid4(), uuid4())

    assert result.error.code == "VAULT_NOT_FOUND"
