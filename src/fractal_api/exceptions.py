"""
Exception classes for the Fractal Global Credits SDK.
"""

from __future__ import annotations

from typing import Any

HTTP_ACCEPTED = 202
HTTP_BAD_REQUEST = 400
HTTP_UNAUTHORIZED = 401
HTTP_NOT_FOUND = 404


class FractalError(Exception):
    """Base exception for Fractal SDK errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Any | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details
        self.status_code = status_code


class NetworkError(FractalError):
    """Raised when the request could not be delivered, even after the retry."""

    def __init__(
        self, message: str = "Network error", details: Any | None = None
    ) -> None:
        super().__init__(message, "NETWORK_ERROR", details)


class TimeoutError(NetworkError):  # noqa: A001
    """Raised when a request times out."""

    def __init__(
        self, message: str = "Request timeout", details: Any | None = None
    ) -> None:
        super().__init__(message, details)
        self.code = "TIMEOUT_ERROR"


class DecodeError(FractalError):
    """Raised when a response body is not the JSON shape that was expected."""

    def __init__(
        self, message: str = "Malformed response body", details: Any | None = None
    ) -> None:
        super().__init__(message, "DECODE_ERROR", details)


class FromDTOError(DecodeError):
    """Raised when a decoded DTO cannot be turned into its domain value."""

    def __init__(self, message: str, details: Any | None = None) -> None:
        super().__init__(message, details)
        self.code = "FROM_DTO_ERROR"


class AuthorizationError(FractalError):
    """Raised locally when the access token does not grant the operation.

    No request is sent when this is raised.
    """

    def __init__(
        self, message: str = "Insufficient scope", details: Any | None = None
    ) -> None:
        super().__init__(message, "AUTHORIZATION_ERROR", details)


class TokenExpiredError(AuthorizationError):
    """Raised locally when the access token has expired."""

    def __init__(
        self, message: str = "The access token has expired", details: Any | None = None
    ) -> None:
        super().__init__(message, details)
        self.code = "TOKEN_EXPIRED"


class InvalidSecretError(FractalError):
    """Raised when a client secret is not valid base64 of the right length."""

    def __init__(
        self,
        message: str = "The provided secret is not a valid secret",
        details: Any | None = None,
    ) -> None:
        super().__init__(message, "INVALID_SECRET", details)


class APIError(FractalError):
    """Base class for errors reported by the server."""


class UnauthorizedError(APIError):
    """Raised when the server rejects the credentials (401)."""

    def __init__(
        self, message: str = "Unauthorized", details: Any | None = None
    ) -> None:
        super().__init__(message, "UNAUTHORIZED", details, HTTP_UNAUTHORIZED)


class BadRequestError(APIError):
    """Raised when the server refuses a malformed request (400)."""

    def __init__(
        self, message: str = "Bad request", details: Any | None = None
    ) -> None:
        super().__init__(message, "BAD_REQUEST", details, HTTP_BAD_REQUEST)


class NotFoundError(APIError):
    """Raised when a resource is not found (404)."""

    def __init__(
        self, message: str = "Resource not found", details: Any | None = None
    ) -> None:
        super().__init__(message, "NOT_FOUND", details, HTTP_NOT_FOUND)


class ClientError(APIError):
    """Raised when the server reports a validation failure (202)."""

    def __init__(self, message: str, details: Any | None = None) -> None:
        super().__init__(message, "CLIENT_ERROR", details, HTTP_ACCEPTED)


class ServerError(APIError):
    """Raised for any other non-200 status."""

    def __init__(
        self,
        message: str = "Internal server error",
        details: Any | None = None,
        status_code: int = 500,
    ) -> None:
        super().__init__(message, "SERVER_ERROR", details, status_code)


def create_error_from_response(
    status_code: int,
    message: str,
    details: Any | None = None,
) -> APIError:
    """Create the error matching a non-200 status code and its ``{message}`` body."""
    if status_code == HTTP_UNAUTHORIZED:
        return UnauthorizedError(message, details)
    elif status_code == HTTP_BAD_REQUEST:
        return BadRequestError(message, details)
    elif status_code == HTTP_NOT_FOUND:
        return NotFoundError(message, details)
    elif status_code == HTTP_ACCEPTED:
        return ClientError(message, details)
    else:
        return ServerError(message, details, status_code)
