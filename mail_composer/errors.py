"""Application error model shared by every component."""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """
    Error categories used across mail-composer.

    Each member carries an HTTP-style label and status code so that errors
    can be reported uniformly by the CLI.
    """

    BAD_REQUEST = ("Bad Request", 400)
    UNAUTHORIZED = ("Unauthorized", 401)
    FORBIDDEN = ("Forbidden", 403)
    NOT_FOUND = ("Not Found", 404)
    REQUEST_TIMEOUT = ("Request Timeout", 408)
    CONFLICT = ("Conflict", 409)
    UNPROCESSABLE_ENTITY = ("Unprocessable Entity", 422)
    TOO_MANY_REQUESTS = ("Too Many Requests", 429)
    UNAVAILABLE_FOR_LEGAL_REASONS = ("Unavailable For Legal Reasons", 451)
    INTERNAL_SERVER_ERROR = ("Internal Server Error", 500)
    SERVICE_UNAVAILABLE = ("Service Unavailable", 503)
    UNEXPECTED_SERVER_ERROR = ("Unexpected Server Error", 599)

    def __init__(self, label: str, code: int):
        self.label = label
        self.code = code

    def as_str(self) -> str:
        """Human-readable label, e.g. "Not Found"."""
        return self.label

    def as_code(self) -> int:
        """HTTP-compatible numeric code, e.g. 404."""
        return self.code


class AppError(Exception):
    """
    Error raised by every mail-composer component.

    Attributes:
        kind: Error category
        message: Human-readable description of what failed
        action: Optional remediation hint for the user
        source: Optional underlying exception
    """

    DEFAULT_MESSAGE = "An error occurred."

    def __init__(
        self,
        kind: ErrorKind,
        message: Optional[str] = None,
        action: Optional[str] = None,
        source: Optional[BaseException] = None,
    ):
        self.kind = kind
        self.message = message or self.DEFAULT_MESSAGE
        self.action = action
        self.source = source
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"kind: {self.kind.as_str()}, message: {self.message}"


def not_found(message: str, action: Optional[str] = None) -> AppError:
    """Build a NOT_FOUND error."""
    return AppError(ErrorKind.NOT_FOUND, message, action)


def invalid_input(
    message: str, action: Optional[str] = None, source: Optional[BaseException] = None
) -> AppError:
    """Build an UNAVAILABLE_FOR_LEGAL_REASONS error (input-shape violation)."""
    return AppError(ErrorKind.UNAVAILABLE_FOR_LEGAL_REASONS, message, action, source)


def unprocessable(
    message: str, action: Optional[str] = None, source: Optional[BaseException] = None
) -> AppError:
    """Build an UNPROCESSABLE_ENTITY error."""
    return AppError(ErrorKind.UNPROCESSABLE_ENTITY, message, action, source)


def internal(
    message: str, action: Optional[str] = None, source: Optional[BaseException] = None
) -> AppError:
    """Build an INTERNAL_SERVER_ERROR error (I/O and process failures)."""
    return AppError(ErrorKind.INTERNAL_SERVER_ERROR, message, action, source)
