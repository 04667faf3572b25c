from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from src.api.error import to_http_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    LoginResponse,
    LoginUseCase,
    RegisterCommand,
    RegisterResponse,
    RegisterUseCase,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=8, description="User password (min 8 chars)")


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password")


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponse
)
async def register(
    request: RegisterRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    User Registration

    Creates an account in trial and links any invitations that were sent to
    this email before the account existed.

    Raises:
        - 409 Conflict: EMAIL_ALREADY_EXISTS
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(
        name=request.name, email=request.email, password=request.password
    )

    use_case = RegisterUseCase(uow, trial_days=ApplicationConfig.TRIAL_DAYS)
    result = await use_case.execute(command)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Login

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIALS
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value
