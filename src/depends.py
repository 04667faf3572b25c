from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from config import ApplicationConfig
from src.adapter.services.sendgrid_email_sender import SendGridEmailSender
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import verify_jwt
from src.app.services.email_sender import IEmailSender

security = HTTPBearer()


async def get_unit_of_work(request: Request):
    # Session factory is created by the application lifespan
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_email_sender() -> IEmailSender:
    return SendGridEmailSender(
        api_key=ApplicationConfig.SENDGRID_API_KEY,
        from_email=ApplicationConfig.SENDGRID_FROM_EMAIL,
        from_name=ApplicationConfig.SENDGRID_FROM_NAME,
        timeout=ApplicationConfig.EMAIL_TIMEOUT_SECONDS,
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing user_id

    Raises:
        HTTPException: 401 if token is invalid or expired
    """
    token = credentials.credentials
    payload = verify_jwt(token)

    if payload is None or "user_id" not in payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return payload


def current_user_id(current_user: dict = Depends(get_current_user)) -> UUID:
    try:
        return UUID(str(current_user["user_id"]))
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
