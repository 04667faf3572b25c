import pytest
from sqlmodel import select

from src.adapter.database import create_session_factory
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.invitation_ledger import InvitationLedger
from src.app.use_cases.vaults import DeleteVaultUseCase
from src.domain.entities import Invitation
from tests.fixtures.interleaving import InterleavedUnitOfWork
from tests.fixtures.seed import seed_vault_with_invitation


@pytest.mark.asyncio
async def test_invitation_into_vault_deleted_meanwhile_is_vault_not_found(engine):
    Session = create_session_factory(engine)
    seeded = await seed_vault_with_invitation(Session, receiver_registered=False)
    vault_id, owner_id = seeded["vault_id"], seeded["owner_id"]

    async def delete_vault():
        async with Session() as session:
            deleted = await DeleteVaultUseCase(SqlAlchemyUnitOfWork(session)).execute(
                vault_id, owner_id
            )
            assert deleted.is_ok()

    async with Session() as session:
        uow = InterleavedUnitOfWork(session, "vaults", "get_by_id", delete_vault)
        async with uow:
            result = await InvitationLedger(uow).create(
                vault_id, owner_id, "carol@example.com"
            )

    assert result.error.code == "VAULT_NOT_FOUND"

    async with Session() as session:
        orphans = (
            await session.exec(select(Invitation).where(Invitation.target_id == vault_id))
        ).all()
    assert orphans == []
