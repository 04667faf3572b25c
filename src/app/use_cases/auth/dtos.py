"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
"""

from pydantic import BaseModel, EmailStr, Field

from src.domain.access_control import AccessInfo


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """Validated registration intent"""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """Public user information in authentication responses"""

    id: str
    name: str
    email: str
    avatar_url: str | None = None
    subscription_status: str


class RegisterResponse(BaseModel):
    """Response for register use case"""

    user: UserInfo
    access_token: str
    linked_invitations: int


class LoginResponse(BaseModel):
    """Response for user login use case"""

    user: UserInfo
    access_token: str
    access: AccessInfo
