from datetime import timedelta
from uuid import uuid4

from src.domain.base import utcnow
from src.domain.entities import (
    Invitation,
    InvitationStatus,
    SubscriptionStatus,
    User,
    Vault,
    VaultMembership,
    VaultRole,
)


def make_user(**overrides) -> User:
    fields = dict(
        id=uuid4(),
        name="Ana",
        email="ana@example.com",
        password_hash="x" * 60,
        subscription_status=SubscriptionStatus.trial,
        trial_expires_at=utcnow() + timedelta(days=10),
    )
    fields.update(overrides)
    return User(**fields)


def make_vault(owner: User, **overrides) -> Vault:
    fields = dict(
        id=uuid4(),
        name="Trip",
        image_url="https://example.com/trip.png",
        owner_id=owner.id,
        is_private=False,
    )
    fields.update(overrides)
    return Vault(**fields)


def make_membership(vault: Vault, user: User, role=VaultRole.member) -> VaultMembership:
    return VaultMembership(id=uuid4(), vault_id=vault.id, user_id=user.id, role=role)


def make_invitation(vault: Vault, sender: User, **overrides) -> Invitation:
    fields = dict(
        id=uuid4(),
        target_id=vault.id,
        target_name=vault.name,
        sender_id=sender.id,
        receiver_id=None,
        receiver_email="guest@example.com",
        status=InvitationStatus.pending,
    )
    fields.update(overrides)
    return Invitation(**fields)
