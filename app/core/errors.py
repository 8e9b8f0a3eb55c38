"""Error taxonomy shared by services and mapped to HTTP responses in app.main."""

from typing import Literal

AuthErrorCode = Literal["NO_TOKEN", "INVALID_TOKEN", "INVALID_CREDENTIALS"]


class AppError(Exception):
    """Base class for errors that carry their own HTTP status."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    """Missing, malformed or out-of-range input."""

    status_code = 400


class AuthError(AppError):
    """
    Bad credentials or bearer token.

    NO_TOKEN and INVALID_CREDENTIALS map to 401, INVALID_TOKEN to 403.
    """

    def __init__(self, message: str, code: AuthErrorCode) -> None:
        super().__init__(message, status_code=403 if code == "INVALID_TOKEN" else 401)
        self.code = code


class NotFoundError(AppError):
    """Record is missing or owned by another account (the two are not distinguished)."""

    status_code = 404


class ConflictError(AppError):
    """Unique constraint violated, e.g. duplicate account email."""

    status_code = 400


class StoreError(AppError):
    """Unexpected persistence failure; details are logged, never returned to clients."""

    status_code = 500
