"""
Admin API Key Authentication

Validates admin API keys for billing and other internal integrations.
"""

import hmac

from fastapi import Header, status
from libs.result import Error
from src.api.error import ClientError
from config import ApplicationConfig


async def verify_admin_api_key(x_admin_api_key: str = Header(None)):
    """
    Verify admin API key from X-Admin-API-Key header.

    Service-to-service auth, separate from user JWTs.

    Raises:
        ClientError: 401 if key is missing or invalid
    """
    if not x_admin_api_key:
        raise ClientError(
            Error("UNAUTHORIZED", "Admin API key required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    if not hmac.compare_digest(
        x_admin_api_key.encode(), ApplicationConfig.ADMIN_API_KEY.encode()
    ):
        raise ClientError(
            Error("INVALID_API_KEY", "Invalid admin API key"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return True
