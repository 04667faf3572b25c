from uuid import UUID

import pytest
from httpx import AsyncClient

from src.domain.entities import (
    Invitation,
    InvitationStatus,
    Notification,
    NotificationType,
    VaultMembership,
    VaultRole,
)
from tests.fixtures.api_helpers import create_vault, fetch_all, invite, register


@pytest.mark.asyncio
async def test_invite_before_signup_links_then_accept(
    client: AsyncClient, db_session, email_outbox
):
    ana = await register(client, "Ana", "ana@example.com")
    vault = await create_vault(client, ana["headers"], name="Trip")

    invited = await invite(client, ana["headers"], vault["id"], "Bob@Example.com")
    assert invited.status_code == 201
    assert invited.json()["invitation"]["receiver_id"] is None
    assert invited.json()["invitation"]["receiver_email"] == "bob@example.com"
    assert invited.json()["email_sent"] is True

    bob = await register(client, "Bob", "bob@example.com")
    assert bob["linked_invitations"] == 1

    pending = await client.get("/invitations", headers=bob["headers"])
    invitations = pending.json()["invitations"]
    assert [i["vault_name"] for i in invitations] == ["Trip"]

    accepted = await client.post(
        f"/invitations/{invitations[0]['id']}/accept", headers=bob["headers"]
    )
    assert accepted.status_code == 200
    assert accepted.json()["role"] == "member"

    memberships = await fetch_all(
        db_session, VaultMembership, VaultMembership.vault_id == UUID(vault["id"])
    )
    roles = {str(m.user_id): m.role for m in memberships}
    assert roles == {
        ana["user"]["id"]: VaultRole.owner,
        bob["user"]["id"]: VaultRole.member,
    }

    rows = await fetch_all(db_session, Invitation)
    assert [r.status for r in rows] == [InvitationStatus.accepted]

    joined = await fetch_all(
        db_session, Notification, Notification.user_id == UUID(ana["user"]["id"])
    )
    assert [n.type for n in joined] == [NotificationType.vault_member_added]
    assert joined[0].message == 'Bob joined the vault "Trip"'

    assert [m["to"] for m in email_outbox.sent] == ["bob@example.com"]
    assert email_outbox.sent[0]["subject"] == 'Ana invited you to the vault "Trip"'


@pytest.mark.asyncio
async def test_cancel_before_signup_leaves_nothing_to_link(
    client: AsyncClient, db_session
):
    ana = await register(client, "Ana", "ana@example.com")
    vault = await create_vault(client, ana["headers"])
    invited = await invite(client, ana["headers"], vault["id"], "bob@example.com")

    cancelled = await client.post(
        f"/invitations/{invited.json()['invitation']['id']}/cancel",
        headers=ana["headers"],
    )
    bob = await register(client, "Bob", "bob@example.com")

    assert cancelled.status_code == 200
    assert cancelled.json()["status"] == "cancelled"
    assert bob["linked_invitations"] == 0
    assert await fetch_all(db_session, Invitation) == []


@pytest.mark.asyncio
async def test_inviting_existing_member_conflicts(client: AsyncClient):
    ana = await register(client, "Ana", "ana@example.com")
    bob = await register(client, "Bob", "bob@example.com")
    vault = await create_vault(client, ana["headers"])
    invited = await invite(client, ana["headers"], vault["id"], "bob@example.com")
    await client.post(
        f"/invitations/{invited.json()['invitation']['id']}/accept",
        headers=bob["headers"],
    )

    again = await invite(client, ana["headers"], vault["id"], "bob@example.com")

    assert again.status_code == 409
    assert again.json()["error"]["code"] == "ALREADY_MEMBER"


@pytest.mark.asyncio
async def test_accepting_twice_is_rejected(client: AsyncClient):
    ana = await register(client, "Ana", "ana@example.com")
    bob = await register(client, "Bob", "bob@example.com")
    vault = await create_vault(client, ana["headers"])
    invited = await invite(client, ana["headers"], vault["id"], "bob@example.com")
    invitation_id = invited.json()["invitation"]["id"]

    first = await client.post(
        f"/invitations/{invitation_id}/accept", headers=bob["headers"]
    )
    second = await client.post(
        f"/invitations/{invitation_id}/accept", headers=bob["headers"]
    )

    assert first.status_code == 200
    assert second.status_code == 409
    assert second.json()["error"]["code"] == "INVALID_OR_PROCESSED"


@pytest.mark.asyncio
async def test_accept_with_existing_membership_keeps_invitation_pending(
    client: AsyncClient, db_session
):
    ana = await register(client, "Ana", "ana@example.com")
    bob = await register(client, "Bob", "bob@example.com")
    vault = await create_vault(client, ana["headers"])
    invited = await invite(client, ana["headers"], vault["id"], "bob@example.com")
    invitation_id = invited.json()["invitation"]["id"]

    db_session.add(
        VaultMembership(
            vault_id=UUID(vault["id"]),
            user_id=UUID(bob["user"]["id"]),
            role=VaultRole.member,
        )
    )
    await db_session.commit()

    response = await client.post(
        f"/invitations/{invitation_id}/accept", headers=bob["headers"]
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "ALREADY_MEMBER"
    rows = await fetch_all(db_session, Invitation, Invitation.id == UUID(invitation_id))
    assert rows[0].status == InvitationStatus.pending


@pytest.mark.asyncio
async def test_accept_by_someone_else_is_rejected(client: AsyncClient):
    ana = await register(client, "Ana", "ana@example.com")
    await register(client, "Bob", "bob@example.com")
    eve = await register(client, "Eve", "eve@example.com")
    vault = await create_vault(client, ana["headers"])
    invited = await invite(client, ana["headers"], vault["id"], "bob@example.com")

    response = await client.post(
        f"/invitations/{invited.json()['invitation']['id']}/accept",
        headers=eve["headers"],
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "INVALID_OR_PROCESSED"


@pytest.mark.asyncio
async def test_private_vault_rejects_invitations(client: AsyncClient):
    ana = await register(client, "Ana", "ana@example.com")
    vault = await create_vault(client, ana["headers"], is_private=True)

    response = await invite(client, ana["headers"], vault["id"], "bob@example.com")

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "PRIVATE_VAULT_NO_INVITES"


@pytest.mark.asyncio
async def test_duplicate_invitation_ignores_email_case(client: AsyncClient):
    ana = await register(client, "Ana", "ana@example.com")
    vault = await create_vault(client, ana["headers"])
    await invite(client, ana["headers"], vault["id"], "bob@example.com")

    response = await invite(client, ana["headers"], vault["id"], "BOB@Example.com")

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "DUPLICATE_INVITATION"


@pytest.mark.asyncio
async def test_non_member_cannot_invite(client: AsyncClient):
    ana = await register(client, "Ana", "ana@example.com")
    eve = await register(client, "Eve", "eve@example.com")
    vault = await create_vault(client, ana["headers"])

    response = await invite(client, eve["headers"], vault["id"], "bob@example.com")

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_decline_then_invite_again(client: AsyncClient, db_session):
    ana = await register(client, "Ana", "ana@example.com")
    bob = await register(client, "Bob", "bob@example.com")
    vault = await create_vault(client, ana["headers"])
    invited = await invite(client, ana["headers"], vault["id"], "bob@example.com")

    declined = await client.post(
        f"/invitations/{invited.json()['invitation']['id']}/decline",
        headers=bob["headers"],
    )
    again = await invite(client, ana["headers"], vault["id"], "bob@example.com")

    assert declined.status_code == 200
    assert declined.json()["status"] == "declined"
    assert again.status_code == 201
    memberships = await fetch_all(
        db_session, VaultMembership, VaultMembership.user_id == UUID(bob["user"]["id"])
    )
    assert memberships == []

    history = await client.get(
        "/invitations", params={"pending_only": False}, headers=bob["headers"]
    )
    assert sorted(i["status"] for i in history.json()["invitations"]) == [
        "declined",
        "pending",
    ]


@pytest.mark.asyncio
async def test_stranger_cannot_cancel(client: AsyncClient):
    ana = await register(client, "Ana", "ana@example.com")
    eve = await register(client, "Eve", "eve@example.com")
    vault = await create_vault(client, ana["headers"])
    invited = await invite(client, ana["headers"], vault["id"], "bob@example.com")

    response = await client.post(
        f"/invitations/{invited.json()['invitation']['id']}/cancel",
        headers=eve["headers"],
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_cancel_removes_invite_notification(client: AsyncClient, db_session):
    ana = await register(client, "Ana", "ana@example.com")
    bob = await register(client, "Bob", "bob@example.com")
    vault = await create_vault(client, ana["headers"])
    invited = await invite(client, ana["headers"], vault["id"], "bob@example.com")

    before = await fetch_all(
        db_session, Notification, Notification.user_id == UUID(bob["user"]["id"])
    )
    await client.post(
        f"/invitations/{invited.json()['invitation']['id']}/cancel",
        headers=ana["headers"],
    )
    after = await fetch_all(
        db_session, Notification, Notification.user_id == UUID(bob["user"]["id"])
    )

    assert [n.type for n in before] == [NotificationType.vault_invite]
    assert after == []


@pytest.mark.asyncio
async def test_receiver_deletes_resolved_invitation(client: AsyncClient, db_session):
    ana = await register(client, "Ana", "ana@example.com")
    bob = await register(client, "Bob", "bob@example.com")
    vault = await create_vault(client, ana["headers"])
    invited = await invite(client, ana["headers"], vault["id"], "bob@example.com")
    invitation_id = invited.json()["invitation"]["id"]
    await client.post(f"/invitations/{invitation_id}/decline", headers=bob["headers"])

    by_sender = await client.delete(
        f"/invitations/{invitation_id}", headers=ana["headers"]
    )
    by_receiver = await client.delete(
        f"/invitations/{invitation_id}", headers=bob["headers"]
    )

    assert by_sender.status_code == 403
    assert by_receiver.status_code == 200
    assert by_receiver.json()["status"] == "deleted"
    assert await fetch_all(db_session, Invitation) == []


@pytest.mark.asyncio
async def test_sent_and_vault_invitation_lists(client: AsyncClient):
    ana = await register(client, "Ana", "ana@example.com")
    eve = await register(client, "Eve", "eve@example.com")
    vault = await create_vault(client, ana["headers"])
    await invite(client, ana["headers"], vault["id"], "bob@example.com")

    sent = await client.get("/invitations/sent", headers=ana["headers"])
    for_vault = await client.get(
        f"/vaults/{vault['id']}/invitations", headers=ana["headers"]
    )
    stranger = await client.get(
        f"/vaults/{vault['id']}/invitations", headers=eve["headers"]
    )

    assert [i["receiver_email"] for i in sent.json()["invitations"]] == [
        "bob@example.com"
    ]
    assert for_vault.json()["view"] == "vault"
    assert len(for_vault.json()["invitations"]) == 1
    assert stranger.status_code == 403
