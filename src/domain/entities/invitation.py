"""
Invitation Entity

Offer to join a vault, addressed to an email that may not have an account yet.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import InvitationStatus, InvitationType

PENDING_ONLY = text("status = 'pending'")


class Invitation(SQLModel, table=True):
    """
    Invitation entity - pending/resolved offers to join a vault.

    Business Rules:
    - receiver_email is always set; receiver_id is null until the invitee
      has an account (deferred linking fills it at registration)
    - At most one pending row per (target_id, receiver_email) and per
      (target_id, receiver_id), enforced by partial unique indexes
    - target_name is a snapshot of the vault name at creation time
    - accepted/declined are terminal; cancel/delete remove the row
    """

    __tablename__ = "invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    type: InvitationType = Field(default=InvitationType.vault)
    target_id: UUID = Field(
        foreign_key="vaults.id", ondelete="CASCADE", nullable=False, index=True
    )
    target_name: str = Field(max_length=255)

    sender_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    receiver_id: Optional[UUID] = Field(
        default=None, foreign_key="users.id", index=True
    )
    receiver_email: str = Field(max_length=255, nullable=False, index=True)

    status: InvitationStatus = Field(default=InvitationStatus.pending)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_invitation_status", "status"),
        Index(
            "uq_invitation_pending_target_email",
            "target_id",
            "receiver_email",
            unique=True,
            sqlite_where=PENDING_ONLY,
            postgresql_where=PENDING_ONLY,
        ),
        Index(
            "uq_invitation_pending_target_receiver",
            "target_id",
            "receiver_id",
            unique=True,
            sqlite_where=PENDING_ONLY,
            postgresql_where=PENDING_ONLY,
        ),
    )
