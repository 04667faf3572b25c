"""
Result type shared by the use case layer.

Use cases never raise for business failures; they return Return.ok(value)
or Return.err(Error(code, message)) and the API layer maps codes to HTTP.
"""

from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class Error:
    """Business error with a stable machine-readable code"""

    def __init__(self, code: str, message: str, reason: Optional[str] = None):
        self.code = code
        self.message = message
        self.reason = reason

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return self.code == other.code and self.message == other.message

    def __repr__(self) -> str:
        return f"Error(code={self.code!r}, message={self.message!r})"


class Result(Generic[T]):
    def __init__(self, value: Optional[T] = None, error: Optional[Error] = None):
        self.value = value
        self.error = error

    def is_ok(self) -> bool:
        return self.error is None

    def is_err(self) -> bool:
        return self.error is not None

    def __repr__(self) -> str:
        if self.is_err():
            return f"Err({self.error!r})"
        return f"Ok({self.value!r})"


class Return:
    @staticmethod
    def ok(value: Any = None) -> Result[Any]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result[Any]:
        return Result(error=error)
