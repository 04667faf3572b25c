"""
Vault Collaboration Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class SubscriptionStatus(str, Enum):
    """Billing state of a user account"""

    trial = "trial"
    active = "active"
    inactive = "inactive"


class VaultRole(str, Enum):
    """User role within a vault"""

    owner = "owner"
    admin = "admin"
    member = "member"


class InvitationType(str, Enum):
    """Kind of resource an invitation grants access to"""

    vault = "vault"
    goal = "goal"


class InvitationStatus(str, Enum):
    """Invitation status (cancel/delete remove the row instead)"""

    pending = "pending"
    accepted = "accepted"
    declined = "declined"


class NotificationType(str, Enum):
    """Notification categories"""

    vault_invite = "vault_invite"
    goal_invite = "goal_invite"
    transaction_added = "transaction_added"
    goal_progress = "goal_progress"
    vault_member_added = "vault_member_added"
    system = "system"


class OwnerType(str, Enum):
    """Discriminant of a polymorphic owner reference"""

    user = "user"
    vault = "vault"


class Visibility(str, Enum):
    """Who inside a vault can see an owned resource"""

    shared = "shared"
    private = "private"
