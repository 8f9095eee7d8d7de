"""Exceptions raised by the booking API clients.

Transport failures are not wrapped: ``httpx.TransportError`` (and subclasses)
reach the caller unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from booking_api.infrastructure.http.http_client import ApiResponse


class BookingApiError(Exception):
    """Base class for errors raised by the booking API clients."""


class HttpStatusError(BookingApiError):
    """Raised when a response status is rejected by the client's status policy."""

    def __init__(self, response: "ApiResponse") -> None:
        self.response = response
        super().__init__(
            f"HTTP {response.status} {response.status_text}: {response.data!r}"
        )


class StatusCodeMismatchError(AssertionError):
    """Raised when a checked operation receives an unexpected status code."""

    def __init__(self, message: str, response: "ApiResponse", expected: int) -> None:
        self.response = response
        self.expected = expected
        super().__init__(message)


class MissingDataError(BookingApiError):
    """Raised when a successful response lacks a field or header we need."""


class MissingSetCookieError(MissingDataError):
    """Raised when a login response carries no Set-Cookie header."""


class TokenNotFoundError(MissingDataError):
    """Raised when the Set-Cookie header holds no ``token=`` entry."""


class InvalidTokenError(MissingDataError):
    """Raised when token validation answers without a ``token`` field."""
