from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.error import to_http_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.notifications import (
    DeleteNotificationResponse,
    DeleteNotificationUseCase,
    ListNotificationsUseCase,
    MarkAllNotificationsReadResponse,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadResponse,
    MarkNotificationReadUseCase,
    NotificationListResponse,
)
from src.depends import current_user_id, get_unit_of_work

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("", status_code=status.HTTP_200_OK, response_model=NotificationListResponse)
async def list_notifications(
    unread_only: bool = Query(False),
    user_id: UUID = Depends(current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListNotificationsUseCase(uow).execute(user_id, unread_only)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.post(
    "/read-all",
    status_code=status.HTTP_200_OK,
    response_model=MarkAllNotificationsReadResponse,
)
async def mark_all_notifications_read(
    user_id: UUID = Depends(current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await MarkAllNotificationsReadUseCase(uow).execute(user_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.post(
    "/{notification_id}/read",
    status_code=status.HTTP_200_OK,
    response_model=MarkNotificationReadResponse,
)
async def mark_notification_read(
    notification_id: UUID,
    user_id: UUID = Depends(current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 404 Not Found: NOTIFICATION_NOT_FOUND
    """
    result = await MarkNotificationReadUseCase(uow).execute(notification_id, user_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.delete(
    "/{notification_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteNotificationResponse,
)
async def delete_notification(
    notification_id: UUID,
    user_id: UUID = Depends(current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 404 Not Found: NOTIFICATION_NOT_FOUND
    """
    result = await DeleteNotificationUseCase(uow).execute(notification_id, user_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value
