"""
Authentication Use Cases

Registration and login.
"""

from .dtos import LoginResponse, RegisterCommand, RegisterResponse, UserInfo
from .login_use_case import LoginUseCase
from .register_use_case import RegisterUseCase

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "RegisterResponse",
    "LoginResponse",
    # DTOs - Nested Models
    "UserInfo",
]
