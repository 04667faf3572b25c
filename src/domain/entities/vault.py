"""
Vault Entity

A named collaboration space owned by exactly one user.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from ..base import utcnow


class Vault(SQLModel, table=True):
    """
    Vault entity - shared (or private) space for goals and transactions.

    Business Rules:
    - Exactly one owner; the owner also holds the single owner membership
    - Private vaults never accept invitations
    - Only the owner can delete it; deletion cascades to memberships,
      invitations and vault-owned goals
    """

    __tablename__ = "vaults"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    image_url: str = Field(max_length=1024)

    owner_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    is_private: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
