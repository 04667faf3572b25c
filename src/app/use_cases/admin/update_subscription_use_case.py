"""
Use Case: Update Subscription

Billing integration endpoint. Moves a user between trial, active and
inactive; every capability gate picks the change up on the next request.
"""

from datetime import UTC, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_control import AccessInfo, get_access_info
from src.domain.entities import SubscriptionStatus


class UpdateSubscriptionResponse(BaseModel):
    """Response DTO for UpdateSubscriptionUseCase"""

    user_id: str
    subscription_status: str
    trial_expires_at: Optional[str]
    access: AccessInfo


class UpdateSubscriptionUseCase:
    """
    Apply a billing event to a user.

    Business Logic:
    1. Validate user exists
    2. Set subscription_status
    3. Replace trial_expires_at when one is supplied (naive UTC is stored)
    4. Return the recomputed access info

    Idempotent: applying the same event twice leaves the same state
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: UUID,
        status: SubscriptionStatus,
        trial_expires_at: Optional[datetime] = None,
    ) -> Result[UpdateSubscriptionResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if not user:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            user.subscription_status = status
            if trial_expires_at is not None:
                if trial_expires_at.tzinfo is not None:
                    trial_expires_at = trial_expires_at.astimezone(UTC).replace(tzinfo=None)
                user.trial_expires_at = trial_expires_at

            await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(
                UpdateSubscriptionResponse(
                    user_id=str(user.id),
                    subscription_status=user.subscription_status.value,
                    trial_expires_at=(
                        user.trial_expires_at.isoformat()
                        if user.trial_expires_at
                        else None
                    ),
                    access=get_access_info(user),
                )
            )
