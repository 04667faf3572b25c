"""
Vault Membership Entity

Links User to Vault with a role.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import VaultRole


class VaultMembership(SQLModel, table=True):
    """
    VaultMembership entity - join between a user and a vault.

    Business Rules:
    - (vault_id, user_id) must be unique
    - Exactly one owner row per vault, matching Vault.owner_id
    - Removed with the vault (ON DELETE CASCADE), so an acceptance racing a
      vault deletion can never leave an orphan row
    """

    __tablename__ = "vault_memberships"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    vault_id: UUID = Field(
        foreign_key="vaults.id", ondelete="CASCADE", nullable=False, index=True
    )
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    role: VaultRole = Field(default=VaultRole.member)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_membership_vault_user", "vault_id", "user_id", unique=True),
    )
