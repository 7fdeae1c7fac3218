"""Custom exception classes for structured error handling.

Every error that reaches the API layer is a LingvoError and is rendered
as ``{"error": message}`` with the exception's status code.
"""

from typing import Any


class LingvoError(Exception):
    """Base exception for all Lingvo errors."""

    def __init__(self, code: str, message: str, status_code: int = 500) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message}


class UnauthorizedError(LingvoError):
    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(code="UNAUTHORIZED", message=message, status_code=401)


class InvalidCredentialsError(LingvoError):
    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(code="INVALID_CREDENTIALS", message=message, status_code=401)


class InvalidRequestError(LingvoError):
    def __init__(self, message: str = "Invalid request") -> None:
        super().__init__(code="INVALID_REQUEST", message=message, status_code=400)


class SelfContactError(LingvoError):
    def __init__(self, message: str = "Cannot add yourself") -> None:
        super().__init__(code="SELF_CONTACT", message=message, status_code=400)


class EmailAlreadyRegisteredError(LingvoError):
    def __init__(self, message: str = "User already exists") -> None:
        super().__init__(code="EMAIL_TAKEN", message=message, status_code=400)


class UserNotFoundError(LingvoError):
    def __init__(self, message: str = "User not found") -> None:
        super().__init__(code="USER_NOT_FOUND", message=message, status_code=404)


class PostNotFoundError(LingvoError):
    def __init__(self, message: str = "Post not found") -> None:
        super().__init__(code="POST_NOT_FOUND", message=message, status_code=404)


class PostOwnershipError(LingvoError):
    def __init__(self, message: str = "Cannot delete others' posts") -> None:
        super().__init__(code="POST_FORBIDDEN", message=message, status_code=403)


class DatabaseConnectionError(LingvoError):
    def __init__(self, message: str = "Database connection failed") -> None:
        super().__init__(code="DATABASE_CONNECTION_ERROR", message=message, status_code=503)
