from datetime import timedelta
from typing import Optional

import bcrypt
from sqlalchemy.exc import IntegrityError

from libs.result import Error, Result, Return
from src.app.services.invitation_ledger import normalize_email
from src.app.services.invitation_linker import InlineInvitationLinker, InvitationLinker
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import SubscriptionStatus, User

from .dtos import RegisterCommand, RegisterResponse, UserInfo


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (validated business intent)
    - Output: Result[RegisterResponse]

    Business Logic:
    1. Reject an email that is already registered
    2. Hash password with bcrypt cost factor 12
    3. Create the user in trial, expiring after trial_days
    4. Link invitations sent to this email before the account existed
    5. Commit user and linking atomically
    """

    def __init__(
        self,
        uow: UnitOfWork,
        linker: Optional[InvitationLinker] = None,
        trial_days: int = 30,
    ):
        self.uow = uow
        self.linker = linker or InlineInvitationLinker()
        self.trial_days = trial_days

    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        email = normalize_email(command.email)

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(email)
            if existing_user:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            password_hash = bcrypt.hashpw(
                command.password.encode("utf-8"), bcrypt.gensalt(12)
            )

            user = User(
                name=command.name.strip(),
                email=email,
                password_hash=password_hash.decode("utf-8"),
                subscription_status=SubscriptionStatus.trial,
                trial_expires_at=utcnow() + timedelta(days=self.trial_days),
            )

            try:
                user = await self.uow.users.create(user)
            except IntegrityError:
                # Lost a race against a concurrent registration
                await self.uow.rollback()
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            linked = await self.linker.link(self.uow, email, user.id)

            await self.uow.commit()

            # Import JWT utility here to avoid circular dependency
            from src.api.utils.jwt import generate_jwt

            return Return.ok(
                RegisterResponse(
                    user=UserInfo(
                        id=str(user.id),
                        name=user.name,
                        email=user.email,
                        avatar_url=user.avatar_url,
                        subscription_status=user.subscription_status.value,
                    ),
                    access_token=generate_jwt(user.id),
                    linked_invitations=linked,
                )
            )
