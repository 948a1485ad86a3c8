"""
CallWhiz Python SDK - Exceptions

This module contains all custom exceptions used by the SDK.

Every error raised by the client derives from CallWhizError and carries an
ErrorKind tag, so callers can branch either on the exception class or on
``error.kind``.
"""

from enum import Enum
from typing import Any, Dict, Optional, Union


class ErrorKind(str, Enum):
    """Kinds of errors raised by the SDK."""

    GENERIC = "generic"
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    RATE_LIMIT = "rate_limit"
    API = "api"


class CallWhizError(Exception):
    """
    Base exception for all CallWhiz SDK errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code if available
        kind: Error kind tag
    """

    kind = ErrorKind.GENERIC

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(message='{self.message}', "
            f"status_code={self.status_code})"
        )


class AuthenticationError(CallWhizError):
    """
    Raised when authentication fails.

    This occurs when the API key is missing on the server side,
    invalid, or revoked.
    """

    kind = ErrorKind.AUTHENTICATION

    def __init__(self, message: str = "Invalid API key") -> None:
        super().__init__(message, status_code=401)


class ValidationError(CallWhizError):
    """
    Raised when request validation fails.

    Raised both for local pre-flight checks (missing identifiers, schema
    violations) and for 400/422 responses from the API.

    Attributes:
        field_errors: Dictionary mapping field paths to error messages
    """

    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str = "Invalid request data",
        field_errors: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__(message, status_code=400)
        self.field_errors = field_errors or {}


class RateLimitError(CallWhizError):
    """
    Raised when the API rate limit is exceeded.

    The client never retries; back off and retry from the calling code.

    Attributes:
        retry_after: Number of seconds to wait before retrying, if the
            server said so
    """

    kind = ErrorKind.RATE_LIMIT

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: Optional[Union[int, str]] = None,
    ) -> None:
        super().__init__(message, status_code=429)
        self.retry_after = _parse_retry_after(retry_after)

    def __str__(self) -> str:
        base = super().__str__()
        if self.retry_after is not None:
            return f"{base}. Retry after {self.retry_after} seconds."
        return base


class APIError(CallWhizError):
    """
    Raised for unsuccessful API responses that have no more specific kind.

    Covers 404s, unclassified HTTP errors, unsuccessful envelopes and
    network failures (in which case status_code is None).

    Attributes:
        response: Raw response body, when one was received
    """

    kind = ErrorKind.API

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response: Any = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.response = response


def _parse_retry_after(value: Optional[Union[int, str]]) -> Optional[int]:
    # Retry-After may also be an HTTP date; only delay-seconds is supported
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
