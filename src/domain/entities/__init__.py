"""
Vault Collaboration Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    SubscriptionStatus,
    VaultRole,
    InvitationType,
    InvitationStatus,
    NotificationType,
    OwnerType,
    Visibility,
)

# Export all entities
from .user import User
from .vault import Vault
from .membership import VaultMembership
from .invitation import Invitation
from .notification import Notification
from .goal import Goal
from .owner import Owner, UserOwner, VaultOwner

__all__ = [
    # Enums
    "SubscriptionStatus",
    "VaultRole",
    "InvitationType",
    "InvitationStatus",
    "NotificationType",
    "OwnerType",
    "Visibility",
    # Entities
    "User",
    "Vault",
    "VaultMembership",
    "Invitation",
    "Notification",
    "Goal",
    # Value objects
    "Owner",
    "UserOwner",
    "VaultOwner",
]
