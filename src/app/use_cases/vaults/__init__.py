"""
Vault Use Cases

Vault lifecycle and membership changes, including the invitation
transitions that add members.
"""

from .accept_invitation_use_case import AcceptInvitationUseCase
from .create_vault_use_case import CreateVaultUseCase
from .decline_invitation_use_case import DeclineInvitationUseCase
from .delete_vault_use_case import DeleteVaultUseCase
from .dtos import (
    AcceptInvitationResponse,
    DeclineInvitationResponse,
    DeleteVaultResponse,
    InviteToVaultResponse,
    RemoveMemberResponse,
    VaultListResponse,
    VaultMemberInfo,
    VaultResponse,
)
from .get_vault_use_case import GetVaultUseCase
from .invite_to_vault_use_case import InviteToVaultUseCase
from .list_user_vaults_use_case import ListUserVaultsUseCase
from .remove_member_use_case import RemoveMemberUseCase
from .update_vault_use_case import UpdateVaultUseCase

__all__ = [
    "CreateVaultUseCase",
    "InviteToVaultUseCase",
    "AcceptInvitationUseCase",
    "DeclineInvitationUseCase",
    "RemoveMemberUseCase",
    "DeleteVaultUseCase",
    "UpdateVaultUseCase",
    "ListUserVaultsUseCase",
    "GetVaultUseCase",
    "VaultResponse",
    "VaultMemberInfo",
    "VaultListResponse",
    "InviteToVaultResponse",
    "AcceptInvitationResponse",
    "DeclineInvitationResponse",
    "RemoveMemberResponse",
    "DeleteVaultResponse",
]
