from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from src.api.error import to_http_error
from src.app.services.email_sender import IEmailSender
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.invitations import (
    InvitationListResponse,
    InvitationView,
    ListInvitationsUseCase,
)
from src.app.use_cases.vaults import (
    CreateVaultUseCase,
    DeleteVaultResponse,
    DeleteVaultUseCase,
    GetVaultUseCase,
    InviteToVaultResponse,
    InviteToVaultUseCase,
    ListUserVaultsUseCase,
    RemoveMemberResponse,
    RemoveMemberUseCase,
    UpdateVaultUseCase,
    VaultListResponse,
    VaultResponse,
)
from src.depends import current_user_id, get_email_sender, get_unit_of_work

router = APIRouter(prefix="/vaults", tags=["Vaults"])


class CreateVaultRequest(BaseModel):
    """Create vault HTTP request payload"""

    name: str = Field(..., min_length=1, max_length=255, description="Vault name")
    image_url: Optional[str] = Field(
        None, max_length=1024, description="Cover image (default used when omitted)"
    )
    is_private: bool = Field(False, description="Private vaults never accept invitations")


class UpdateVaultRequest(BaseModel):
    """Update vault HTTP request payload; omitted fields stay as they are"""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    image_url: Optional[str] = Field(None, max_length=1024)
    is_private: Optional[bool] = None


class InviteRequest(BaseModel):
    """Invite to vault HTTP request payload"""

    email: EmailStr = Field(..., description="Email address to invite")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=VaultResponse)
async def create_vault(
    request: CreateVaultRequest,
    user_id: UUID = Depends(current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Vault

    The caller becomes the owner. Requires an active subscription or trial.

    Raises:
        - 403 Forbidden: access expired
        - 404 Not Found: USER_NOT_FOUND
    """
    use_case = CreateVaultUseCase(
        uow, default_image_url=ApplicationConfig.DEFAULT_VAULT_IMAGE_URL
    )
    result = await use_case.execute(
        user_id, request.name, request.image_url, request.is_private
    )

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=VaultListResponse)
async def list_vaults(
    user_id: UUID = Depends(current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Vaults the caller owns or belongs to"""
    result = await ListUserVaultsUseCase(uow).execute(user_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get("/{vault_id}", status_code=status.HTTP_200_OK, response_model=VaultResponse)
async def get_vault(
    vault_id: UUID,
    user_id: UUID = Depends(current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Vault

    Raises:
        - 403 Forbidden: not a member, or owner with expired access
        - 404 Not Found: VAULT_NOT_FOUND
    """
    result = await GetVaultUseCase(uow).execute(vault_id, user_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.patch("/{vault_id}", status_code=status.HTTP_200_OK, response_model=VaultResponse)
async def update_vault(
    vault_id: UUID,
    request: UpdateVaultRequest,
    user_id: UUID = Depends(current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Vault

    Renaming does not change the vault name shown on invitations already sent.

    Raises:
        - 403 Forbidden: caller is not the owner, or owner with expired access
        - 404 Not Found: VAULT_NOT_FOUND
    """
    result = await UpdateVaultUseCase(uow).execute(
        vault_id,
        user_id,
        name=request.name,
        image_url=request.image_url,
        is_private=request.is_private,
    )

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.delete(
    "/{vault_id}", status_code=status.HTTP_200_OK, response_model=DeleteVaultResponse
)
async def delete_vault(
    vault_id: UUID,
    user_id: UUID = Depends(current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Vault

    Owner only; removes memberships, invitations and vault goals with it.

    Raises:
        - 403 Forbidden: caller is not the owner
        - 404 Not Found: VAULT_NOT_FOUND
    """
    result = await DeleteVaultUseCase(uow).execute(vault_id, user_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.post(
    "/{vault_id}/invitations",
    status_code=status.HTTP_201_CREATED,
    response_model=InviteToVaultResponse,
)
async def invite_to_vault(
    vault_id: UUID,
    request: InviteRequest,
    user_id: UUID = Depends(current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: IEmailSender = Depends(get_email_sender),
):
    """
    Invite to Vault

    The email may belong to someone without an account; the invitation is
    linked to them when they register.

    Raises:
        - 400 Bad Request: PRIVATE_VAULT_NO_INVITES
        - 403 Forbidden: caller is not a member, or owner with expired access
        - 404 Not Found: VAULT_NOT_FOUND, USER_NOT_FOUND
        - 409 Conflict: ALREADY_MEMBER, DUPLICATE_INVITATION
    """
    use_case = InviteToVaultUseCase(
        uow, email_sender=email_sender, app_base_url=ApplicationConfig.APP_BASE_URL
    )
    result = await use_case.execute(vault_id, user_id, request.email)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.get(
    "/{vault_id}/invitations",
    status_code=status.HTTP_200_OK,
    response_model=InvitationListResponse,
)
async def list_vault_invitations(
    vault_id: UUID,
    user_id: UUID = Depends(current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Pending invitations of a vault (members only)"""
    result = await ListInvitationsUseCase(uow).execute(
        user_id, InvitationView.vault, vault_id=vault_id
    )

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.delete(
    "/{vault_id}/members/{member_id}",
    status_code=status.HTTP_200_OK,
    response_model=RemoveMemberResponse,
)
async def remove_member(
    vault_id: UUID,
    member_id: UUID,
    user_id: UUID = Depends(current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove Member

    Raises:
        - 403 Forbidden: target is the owner, or caller is not the owner
        - 404 Not Found: VAULT_NOT_FOUND, MEMBERSHIP_NOT_FOUND
    """
    result = await RemoveMemberUseCase(uow).execute(vault_id, member_id, user_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value
