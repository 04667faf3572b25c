"""
Invitation Use Cases

Cancel, delete and list invitations. Accept and decline live with the
vault use cases because they change membership.
"""

from .cancel_invitation_use_case import CancelInvitationUseCase
from .delete_invitation_use_case import DeleteInvitationUseCase
from .dtos import (
    CancelInvitationResponse,
    DeleteInvitationResponse,
    InvitationInfo,
    InvitationListResponse,
    InvitationView,
)
from .list_invitations_use_case import ListInvitationsUseCase

__all__ = [
    "CancelInvitationUseCase",
    "DeleteInvitationUseCase",
    "ListInvitationsUseCase",
    "CancelInvitationResponse",
    "DeleteInvitationResponse",
    "InvitationInfo",
    "InvitationListResponse",
    "InvitationView",
]
