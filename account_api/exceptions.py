from typing import List, Optional

from fastapi import status


class AccountServiceError(Exception):
    """Base class for errors that map onto a client-facing status code."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(AccountServiceError):
    """One or more field rules failed; all messages are reported together."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, messages: List[str] | str):
        self.messages = [messages] if isinstance(messages, str) else list(messages)
        super().__init__(", ".join(self.messages))


class DuplicateAccount(AccountServiceError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "User already exists"):
        super().__init__(message)


class NotFound(AccountServiceError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class InvalidCredential(AccountServiceError):
    """Bad password or OTP. Messages never reveal whether the account exists."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class Unauthorized(AccountServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class StorageError(AccountServiceError):
    """The backing store failed. Detail is logged, never sent to the client."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Storage operation failed"):
        super().__init__(message)
