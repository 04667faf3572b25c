"""
User Entity

Represents a person who can own vaults and collaborate in others.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import SubscriptionStatus


class User(SQLModel, table=True):
    """
    User entity - an account holder.

    Business Rules:
    - Email must be unique across all users (stored lower-cased)
    - Starts in trial at registration; billing events move it to active/inactive
    - Never deleted by the collaboration subsystem
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars
    avatar_url: Optional[str] = Field(default=None, max_length=1024)

    subscription_status: SubscriptionStatus = Field(default=SubscriptionStatus.trial)
    trial_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_subscription_status", "subscription_status"),)
