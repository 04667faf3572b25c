"""
Subscription-based access control.

Every capability gate in the service derives from effective_status():

- trial: full access while trial_expires_at is in the future
- active: full access (paying subscriber)
- inactive / expired trial: restricted - may still accept invitations and
  collaborate in vaults owned by others, but may not create vaults or use
  the personal workspace

Nothing here raises; malformed data degrades to the most permissive safe
reading and is logged.
"""

import logging
import math
from datetime import UTC, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import SubscriptionStatus, User

logger = logging.getLogger(__name__)

FULL_ACCESS_STATUSES = (SubscriptionStatus.active, SubscriptionStatus.trial)


class AccessInfo(BaseModel):
    """Snapshot of a user's capabilities, suitable for a client banner"""

    status: SubscriptionStatus
    full_access: bool
    is_trial_active: bool
    is_active: bool
    is_restricted: bool
    days_remaining: int
    can_create_vaults: bool
    can_create_own_resources: bool
    can_access_personal_workspace: bool
    can_accept_invitations: bool
    message: str


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _now(now: Optional[datetime]) -> datetime:
    return _as_utc(now) if now is not None else datetime.now(UTC)


def effective_status(user: User, now: Optional[datetime] = None) -> SubscriptionStatus:
    """Subscription status with an elapsed trial downgraded to inactive"""
    status = user.subscription_status

    if status == SubscriptionStatus.active:
        return SubscriptionStatus.active

    if status == SubscriptionStatus.inactive:
        return SubscriptionStatus.inactive

    if status == SubscriptionStatus.trial:
        if user.trial_expires_at is None:
            # Treated as a valid trial so migrated accounts are not locked out
            logger.warning(f"User {user.id} is on trial but has no trial expiry date")
            return SubscriptionStatus.trial

        if _as_utc(user.trial_expires_at) > _now(now):
            return SubscriptionStatus.trial
        return SubscriptionStatus.inactive

    logger.warning(f"User {user.id} has unknown subscription status {status!r}")
    return SubscriptionStatus.inactive


def has_full_access(user: User, now: Optional[datetime] = None) -> bool:
    return effective_status(user, now) in FULL_ACCESS_STATUSES


def can_create_own_resources(user: User, now: Optional[datetime] = None) -> bool:
    return has_full_access(user, now)


def can_access_personal_workspace(user: User, now: Optional[datetime] = None) -> bool:
    return has_full_access(user, now)


def can_create_vaults(user: User, now: Optional[datetime] = None) -> bool:
    return has_full_access(user, now)


def can_accept_invitations(user: User) -> bool:
    # Always allowed: expired users keep collaborating in other people's vaults
    return True


def can_access_vault(
    user: User,
    vault_owner_id: UUID,
    is_member: bool,
    now: Optional[datetime] = None,
) -> bool:
    """
    Members always reach a vault owned by someone else; the owner needs
    full access to reach their own vault.
    """
    if not is_member:
        return False

    if vault_owner_id == user.id:
        return has_full_access(user, now)

    return True


def can_manage_vault_resources(
    user: User, vault_owner_id: UUID, now: Optional[datetime] = None
) -> bool:
    if vault_owner_id == user.id:
        return has_full_access(user, now)

    return True


def trial_days_remaining(user: User, now: Optional[datetime] = None) -> int:
    if effective_status(user, now) != SubscriptionStatus.trial:
        return 0
    if user.trial_expires_at is None:
        return 0
    seconds = (_as_utc(user.trial_expires_at) - _now(now)).total_seconds()
    return max(0, math.ceil(seconds / 86400))


def _access_message(status: SubscriptionStatus, days_remaining: int) -> str:
    if status == SubscriptionStatus.trial:
        unit = "day" if days_remaining == 1 else "days"
        return f"You are on a free trial. {days_remaining} {unit} remaining."
    if status == SubscriptionStatus.inactive:
        return (
            "Your access has expired. You can keep collaborating in vaults owned "
            "by other users, but you cannot use your personal workspace or "
            "create new vaults."
        )
    return ""


def get_access_info(user: User, now: Optional[datetime] = None) -> AccessInfo:
    status = effective_status(user, now)
    full_access = status in FULL_ACCESS_STATUSES
    days_remaining = trial_days_remaining(user, now)

    return AccessInfo(
        status=status,
        full_access=full_access,
        is_trial_active=status == SubscriptionStatus.trial,
        is_active=status == SubscriptionStatus.active,
        is_restricted=not full_access,
        days_remaining=days_remaining,
        can_create_vaults=can_create_vaults(user, now),
        can_create_own_resources=can_create_own_resources(user, now),
        can_access_personal_workspace=can_access_personal_workspace(user, now),
        can_accept_invitations=can_accept_invitations(user),
        message=_access_message(status, days_remaining),
    )
