from fastapi import status
from libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Business error codes surfaced to clients; anything else is a server error
CLIENT_ERROR_STATUS = {
    "VAULT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVITATION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "MEMBERSHIP_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "NOTIFICATION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "ALREADY_MEMBER": status.HTTP_409_CONFLICT,
    "DUPLICATE_INVITATION": status.HTTP_409_CONFLICT,
    "INVALID_OR_PROCESSED": status.HTTP_409_CONFLICT,
    "EMAIL_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "PRIVATE_VAULT_NO_INVITES": status.HTTP_400_BAD_REQUEST,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
}


def to_http_error(error: Error) -> Exception:
    """Translate a use case error into the exception the handlers render"""
    status_code = CLIENT_ERROR_STATUS.get(error.code)
    if status_code is None:
        return ServerError(error)
    return ClientError(error, status_code=status_code)
