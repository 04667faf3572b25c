"""
User Use Cases

Current-user context.
"""

from .get_access_info_use_case import AccessInfoResponse, GetAccessInfoUseCase

__all__ = [
    "GetAccessInfoUseCase",
    "AccessInfoResponse",
]
