from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import to_http_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import AccessInfoResponse, GetAccessInfoUseCase
from src.depends import current_user_id, get_unit_of_work

router = APIRouter(tags=["User"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=AccessInfoResponse)
async def get_me(
    user_id: UUID = Depends(current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current user and their subscription-derived capabilities.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: USER_NOT_FOUND
    """
    use_case = GetAccessInfoUseCase(uow)
    result = await use_case.execute(user_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value
