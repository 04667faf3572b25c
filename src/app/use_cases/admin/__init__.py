"""Admin use cases for billing and system integrations."""

from .update_subscription_use_case import (
    UpdateSubscriptionResponse,
    UpdateSubscriptionUseCase,
)

__all__ = [
    "UpdateSubscriptionUseCase",
    "UpdateSubscriptionResponse",
]
