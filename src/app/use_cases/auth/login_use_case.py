"""
Login Use Case

Handles user authentication and returns a JWT access token together with
the caller's current capabilities.
"""

import bcrypt

from libs.result import Error, Result, Return
from src.api.utils.jwt import generate_jwt
from src.app.services.invitation_ledger import normalize_email
from src.app.services.unit_of_work import UnitOfWork
from src.domain.access_control import get_access_info

from .dtos import LoginResponse, UserInfo

# Checked against when the email is unknown so both paths cost one bcrypt verify
_DUMMY_HASH = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(12))


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Constant-time password comparison to prevent timing attacks
    - Login is never blocked by subscription status; expired users keep
      collaborating in vaults owned by others
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with LoginResponse, or Error(INVALID_CREDENTIALS)
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(normalize_email(email))

            if user is None:
                bcrypt.checkpw(password.encode(), _DUMMY_HASH)
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            password_valid = bcrypt.checkpw(
                password.encode(), user.password_hash.encode()
            )
            if not password_valid:
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            return Return.ok(
                LoginResponse(
                    user=UserInfo(
                        id=str(user.id),
                        name=user.name,
                        email=user.email,
                        avatar_url=user.avatar_url,
                        subscription_status=user.subscription_status.value,
                    ),
                    access_token=generate_jwt(user.id),
                    access=get_access_info(user),
                )
            )
