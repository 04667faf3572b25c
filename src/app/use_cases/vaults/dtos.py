"""
Vault Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the vault domain.
"""

from typing import List, Optional

from pydantic import BaseModel

from src.app.use_cases.invitations.dtos import InvitationInfo


# ============================================================================
# Response DTOs
# ============================================================================


class VaultMemberInfo(BaseModel):
    """Member of a vault with their role"""

    user_id: str
    name: str
    email: str
    avatar_url: Optional[str] = None
    role: str


class VaultResponse(BaseModel):
    """Vault with its members, as seen by one user"""

    id: str
    name: str
    image_url: str
    owner_id: str
    is_private: bool
    created_at: str
    members: List[VaultMemberInfo]
    can_access: bool


class VaultListResponse(BaseModel):
    """Response for list user vaults use case"""

    vaults: List[VaultResponse]


class InviteToVaultResponse(BaseModel):
    """Response for invite to vault use case"""

    invitation: InvitationInfo
    email_sent: bool


class AcceptInvitationResponse(BaseModel):
    """Response for accept invitation use case"""

    invitation_id: str
    vault_id: str
    status: str
    role: str


class DeclineInvitationResponse(BaseModel):
    """Response for decline invitation use case"""

    invitation_id: str
    status: str


class RemoveMemberResponse(BaseModel):
    """Response for remove member use case"""

    status: str


class DeleteVaultResponse(BaseModel):
    """Response for delete vault use case"""

    status: str
    invitations_deleted: int
    members_removed: int
