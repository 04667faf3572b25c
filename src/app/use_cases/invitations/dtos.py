"""
Invitation Use Case DTOs (Data Transfer Objects)
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Invitation


class InvitationView(str, Enum):
    received = "received"
    pending = "pending"
    sent = "sent"
    vault = "vault"


# ============================================================================
# Response DTOs
# ============================================================================


class InvitationInfo(BaseModel):
    """Invitation as shown to sender and recipient"""

    id: str
    type: str
    vault_id: str
    vault_name: str
    sender_id: str
    receiver_id: Optional[str]
    receiver_email: str
    status: str
    created_at: str

    @classmethod
    def from_entity(cls, invitation: Invitation) -> "InvitationInfo":
        return cls(
            id=str(invitation.id),
            type=invitation.type.value,
            vault_id=str(invitation.target_id),
            vault_name=invitation.target_name,
            sender_id=str(invitation.sender_id),
            receiver_id=str(invitation.receiver_id) if invitation.receiver_id else None,
            receiver_email=invitation.receiver_email,
            status=invitation.status.value,
            created_at=invitation.created_at.isoformat(),
        )


class InvitationListResponse(BaseModel):
    """Response for list invitations use case"""

    view: InvitationView
    invitations: List[InvitationInfo]


class CancelInvitationResponse(BaseModel):
    """Response for cancel invitation use case"""

    invitation_id: str
    status: str


class DeleteInvitationResponse(BaseModel):
    """Response for delete invitation use case"""

    invitation_id: str
    status: str
