from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from src.app.services.notification_emitter import (
    NotificationEmitter,
    NotificationError,
    best_effort_notifications,
)
from src.domain.entities import NotificationType


@pytest.mark.asyncio
async def test_create_builds_unread_notification(mock_uow):
    user_id = uuid4()
    related_id = uuid4()

    notification = await NotificationEmitter(mock_uow).create(
        user_id,
        NotificationType.vault_invite,
        "Ana invited you",
        link="/invitations",
        related_id=related_id,
    )

    assert notification.user_id == user_id
    assert notification.type == NotificationType.vault_invite
    assert notification.is_read is False
    assert notification.related_id == related_id
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_member_added_message(mock_uow):
    vault_id = uuid4()

    notification = await NotificationEmitter(mock_uow).create_member_added(
        uuid4(), "Bob", vault_id, "Trip"
    )

    assert notification.type == NotificationType.vault_member_added
    assert notification.message == 'Bob joined the vault "Trip"'
    assert notification.link == f"/vaults/{vault_id}"


@pytest.mark.asyncio
async def test_storage_failure_becomes_notification_error(mock_uow):
    mock_uow.notifications.create.side_effect = OperationalError("INSERT", {}, Exception())

    with pytest.raises(NotificationError):
        await NotificationEmitter(mock_uow).create(
            uuid4(), NotificationType.system, "hello"
        )


@pytest.mark.asyncio
async def test_mark_read_by_related_id_is_idempotent(mock_uow):
    related_id = uuid4()
    user_id = uuid4()
    mock_uow.notifications.mark_read_by_related_id.side_effect = [1, 0]
    emitter = NotificationEmitter(mock_uow)

    first = await emitter.mark_read_by_related_id(related_id, user_id)
    second = await emitter.mark_read_by_related_id(related_id, user_id)

    assert (first, second) == (1, 0)


@pytest.mark.asyncio
async def test_delete_by_related_id(mock_uow):
    related_id = uuid4()
    mock_uow.notifications.delete_by_related_ids.return_value = 1

    deleted = await NotificationEmitter(mock_uow).delete_by_related_id(related_id)

    assert deleted == 1
    mock_uow.notifications.delete_by_related_ids.assert_awaited_once_with([related_id])


@pytest.mark.asyncio
async def test_list_and_count(mock_uow):
    user_id = uuid4()
    mock_uow.notifications.get_by_user_id.return_value = []
    mock_uow.notifications.count_unread.return_value = 4
    emitter = NotificationEmitter(mock_uow)

    assert await emitter.list_for(user_id, unread_only=True) == []
    assert await emitter.unread_count_for(user_id) == 4
    mock_uow.notifications.get_by_user_id.assert_awaited_once_with(
        user_id, unread_only=True
    )


@pytest.mark.asyncio
async def test_best_effort_commits_on_success(mock_uow):
    async with best_effort_notifications(mock_uow, "test") as notifications:
        await notifications.create(uuid4(), NotificationType.system, "hello")

    mock_uow.commit.assert_awaited_once()
    mock_uow.rollback.assert_not_awaited()


@pytest.mark.asyncio
async def test_best_effort_swallows_and_rolls_back(mock_uow, caplog):
    mock_uow.notifications.create.side_effect = OperationalError("INSERT", {}, Exception())

    with caplog.at_level("WARNING"):
        async with best_effort_notifications(mock_uow, "test") as notifications:
            await notifications.create(uuid4(), NotificationType.system, "hello")

    mock_uow.commit.assert_not_awaited()
    mock_uow.rollback.assert_awaited_once()
    assert "Notification side effect failed" in caplog.text


@pytest.mark.asyncio
async def test_best_effort_swallows_commit_failure(mock_uow):
    mock_uow.commit = AsyncMock(side_effect=OperationalError("COMMIT", {}, Exception()))

    async with best_effort_notifications(mock_uow, "test") as notifications:
        await notifications.mark_read_by_related_id(uuid4(), uuid4())

    mock_uow.rollback.assert_awaited_once()
