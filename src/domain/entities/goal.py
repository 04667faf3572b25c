"""
Goal Entity

Savings goal owned by a user or by a vault. Only ownership and visibility
are modelled here; ledger arithmetic lives elsewhere.
"""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import OwnerType, Visibility
from .owner import Owner, UserOwner, VaultOwner, owner_from_columns, owner_to_columns


class Goal(SQLModel, table=True):
    """
    Goal entity - stored as (owner_type, owner_id), both non-null.
    """

    __tablename__ = "goals"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)

    owner_type: OwnerType = Field(nullable=False)
    owner_id: UUID = Field(nullable=False)
    visibility: Visibility = Field(default=Visibility.shared)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_goal_owner", "owner_type", "owner_id"),)

    @classmethod
    def for_owner(cls, owner: Owner, **kwargs) -> "Goal":
        owner_type, owner_id = owner_to_columns(owner)
        return cls(owner_type=owner_type, owner_id=owner_id, **kwargs)

    @property
    def owner(self) -> Union[UserOwner, VaultOwner]:
        return owner_from_columns(self.owner_type, self.owner_id)
