"""
Admin API Routes - System Administration Endpoints

These endpoints are for internal service integrations (e.g., billing system).
Authentication is via Admin API Key, not user JWTs.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import to_http_error
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admin import (
    UpdateSubscriptionResponse,
    UpdateSubscriptionUseCase,
)
from src.depends import get_unit_of_work
from src.domain.entities import SubscriptionStatus

router = APIRouter(prefix="/admin", tags=["Admin"])


class UpdateSubscriptionRequest(BaseModel):
    status: SubscriptionStatus = Field(..., description="New subscription status")
    trial_expires_at: Optional[datetime] = Field(
        None, description="Trial end (UTC); kept unchanged when omitted"
    )


@router.put(
    "/users/{user_id}/subscription",
    status_code=status.HTTP_200_OK,
    response_model=UpdateSubscriptionResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def update_subscription(
    user_id: UUID,
    request: UpdateSubscriptionRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Subscription

    Billing system endpoint applying a subscription change to a user.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 404 Not Found: USER_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    use_case = UpdateSubscriptionUseCase(uow)
    result = await use_case.execute(user_id, request.status, request.trial_expires_at)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value
