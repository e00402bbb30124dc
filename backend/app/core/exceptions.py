"""
Console exceptions

Errors raised by the REST client and the form layer. Routers let them
propagate; the handlers installed in app.main turn them into JSON banners.
"""
from typing import Any, Dict, Optional


class ConsoleError(Exception):
    """Base class for console errors"""


class ApiError(ConsoleError):
    """Non-2xx response from the REST backend"""

    def __init__(self, message: str, status: int = 500, response: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.response = response if response is not None else {}

    def to_dict(self) -> Dict[str, Any]:
        return {"detail": self.message, "response": self.response}


class AuthenticationRequired(ApiError):
    """Backend rejected the session token (401)"""

    DEFAULT_MESSAGE = "Authentication required. Please login again."

    def __init__(self, message: str = DEFAULT_MESSAGE, response: Optional[Any] = None):
        super().__init__(message, status=401, response=response)


class BackendUnavailable(ApiError):
    """REST backend could not be reached"""

    def __init__(self, message: str):
        super().__init__(message, status=503)


class FormValidationError(ConsoleError):
    """
    Client-side form validation failed

    Carries one message per offending field, in field order.
    """

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        self.message = next(iter(self.errors.values()), "Invalid form data")
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"detail": self.message, "errors": self.errors}
