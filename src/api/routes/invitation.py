from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.error import to_http_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.invitations import (
    CancelInvitationResponse,
    CancelInvitationUseCase,
    DeleteInvitationResponse,
    DeleteInvitationUseCase,
    InvitationListResponse,
    InvitationView,
    ListInvitationsUseCase,
)
from src.app.use_cases.vaults import (
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
    DeclineInvitationResponse,
    DeclineInvitationUseCase,
)
from src.depends import current_user_id, get_unit_of_work

router = APIRouter(prefix="/invitations", tags=["Invitations"])


@router.get("", status_code=status.HTTP_200_OK, response_model=InvitationListResponse)
async def list_received_invitations(
    pending_only: bool = Query(True, description="Only invitations awaiting an answer"),
    user_id: UUID = Depends(current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Invitations addressed to the caller"""
    view = InvitationView.pending if pending_only else InvitationView.received
    result = await ListInvitationsUseCase(uow).execute(user_id, view)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get(
    "/sent", status_code=status.HTTP_200_OK, response_model=InvitationListResponse
)
async def list_sent_invitations(
    user_id: UUID = Depends(current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Invitations the caller sent"""
    result = await ListInvitationsUseCase(uow).execute(user_id, InvitationView.sent)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.post(
    "/{invitation_id}/accept",
    status_code=status.HTTP_200_OK,
    response_model=AcceptInvitationResponse,
)
async def accept_invitation(
    invitation_id: UUID,
    user_id: UUID = Depends(current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Accept Invitation

    Adds the caller to the vault and marks the invitation accepted, atomically.

    Raises:
        - 404 Not Found: VAULT_NOT_FOUND
        - 409 Conflict: INVALID_OR_PROCESSED, ALREADY_MEMBER
    """
    result = await AcceptInvitationUseCase(uow).execute(invitation_id, user_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.post(
    "/{invitation_id}/decline",
    status_code=status.HTTP_200_OK,
    response_model=DeclineInvitationResponse,
)
async def decline_invitation(
    invitation_id: UUID,
    user_id: UUID = Depends(current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Decline Invitation

    Raises:
        - 409 Conflict: INVALID_OR_PROCESSED
    """
    result = await DeclineInvitationUseCase(uow).execute(invitation_id, user_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.post(
    "/{invitation_id}/cancel",
    status_code=status.HTTP_200_OK,
    response_model=CancelInvitationResponse,
)
async def cancel_invitation(
    invitation_id: UUID,
    user_id: UUID = Depends(current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Cancel Invitation

    Sender or vault owner withdraws a pending invitation.

    Raises:
        - 403 Forbidden: caller is neither sender nor vault owner
        - 404 Not Found: INVITATION_NOT_FOUND
        - 409 Conflict: INVALID_OR_PROCESSED
    """
    result = await CancelInvitationUseCase(uow).execute(invitation_id, user_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.delete(
    "/{invitation_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteInvitationResponse,
)
async def delete_invitation(
    invitation_id: UUID,
    user_id: UUID = Depends(current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Invitation

    Recipient removes an invitation from their history.

    Raises:
        - 403 Forbidden: caller is not the recipient
        - 404 Not Found: INVITATION_NOT_FOUND
    """
    result = await DeleteInvitationUseCase(uow).execute(invitation_id, user_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value
