"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Auth
  2xxx: Account
  9xxx: System

Every error maps to one HTTP status and one client-facing message. 5xx
errors never expose their cause; the optional ``detail`` is for logs only.
"""

UNAUTHORIZED_MESSAGE = "Invalid username or token."
INTERNAL_ERROR_MESSAGE = "An Unexpected Error Occured."


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
        detail: str | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        self.detail = detail
        super().__init__(detail or message)


# --- 1xxx: Auth ---

class UnauthorizedError(AppError):
    """Credentials were missing or did not match.

    Subclasses only differ in ``code``; status and message are identical so
    the caller cannot tell which check failed.
    """

    def __init__(self, code: int = 1000) -> None:
        super().__init__(code, UNAUTHORIZED_MESSAGE, 400)


class MissingCredentialsError(UnauthorizedError):
    def __init__(self) -> None:
        super().__init__(1001)


class InvalidCredentialsError(UnauthorizedError):
    def __init__(self) -> None:
        super().__init__(1002)


# --- 2xxx: Account ---

class BalanceNotFoundError(AppError):
    def __init__(self, username: str) -> None:
        super().__init__(2001, f"No coin balance found for user {username}.", 404)


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str | None = None, code: int = 9000) -> None:
        super().__init__(code, INTERNAL_ERROR_MESSAGE, 500, detail)


class DecodeFailureError(InternalError):
    def __init__(self, detail: str) -> None:
        super().__init__(detail, code=9001)


class StoreUnavailableError(InternalError):
    def __init__(self, detail: str) -> None:
        super().__init__(detail, code=9002)
