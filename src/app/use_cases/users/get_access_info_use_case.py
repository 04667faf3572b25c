"""
Get Access Info Use Case

Loads the current user and the capability snapshot derived from their
subscription.
"""

from uuid import UUID

from pydantic import BaseModel

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import UserInfo
from src.domain.access_control import AccessInfo, get_access_info


class AccessInfoResponse(BaseModel):
    """Response DTO for GetAccessInfoUseCase"""

    user: UserInfo
    access: AccessInfo


class GetAccessInfoUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[AccessInfoResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            return Return.ok(
                AccessInfoResponse(
                    user=UserInfo(
                        id=str(user.id),
                        name=user.name,
                        email=user.email,
                        avatar_url=user.avatar_url,
                        subscription_status=user.subscription_status.value,
                    ),
                    access=get_access_info(user),
                )
            )
