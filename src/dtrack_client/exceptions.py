"""
Custom exceptions for the Dependency-Track client.

This module defines the exception hierarchy raised by the client and its
resource services, so callers can tell transport, decoding and API failures
apart.
"""

import asyncio
from typing import Any


class DTrackError(Exception):
    """Base exception for Dependency-Track client errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code or "DTRACK_ERROR"
        self.context = context or {}


class TransportError(DTrackError):
    """Exception for network and timeout failures."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message, "TRANSPORT_ERROR", context)


class DecodingError(DTrackError):
    """Exception for response bodies that cannot be decoded."""

    def __init__(
        self,
        message: str,
        body: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, "DECODING_ERROR", context)
        self.body = body


class APIError(DTrackError):
    """Exception for non-success HTTP responses."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
        context: dict[str, Any] | None = None,
        code: str = "API_ERROR",
    ):
        super().__init__(message, code, context)
        self.status_code = status_code
        self.body = body


class AuthenticationError(APIError):
    """Exception for rejected or missing API keys (401)."""

    def __init__(self, message: str, body: str | None = None, **kwargs: Any):
        super().__init__(
            message, status_code=401, body=body, code="AUTHENTICATION_ERROR", **kwargs
        )


class AuthorizationError(APIError):
    """Exception for API keys lacking a required permission (403)."""

    def __init__(self, message: str, body: str | None = None, **kwargs: Any):
        super().__init__(
            message, status_code=403, body=body, code="AUTHORIZATION_ERROR", **kwargs
        )


class NotFoundError(APIError):
    """Exception for missing resources (404)."""

    def __init__(self, message: str, body: str | None = None, **kwargs: Any):
        super().__init__(
            message, status_code=404, body=body, code="NOT_FOUND_ERROR", **kwargs
        )


class InvalidArgumentError(DTrackError, ValueError):
    """Exception for invalid caller input, raised before any request is sent."""

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, "INVALID_ARGUMENT_ERROR", context)
        self.argument = argument


class ConfigurationError(DTrackError):
    """Exception for configuration related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message, "CONFIGURATION_ERROR", context)


class EventWaitTimeoutError(DTrackError, asyncio.TimeoutError):
    """Exception for event waits that outlive their deadline."""

    def __init__(
        self,
        message: str,
        token: str | None = None,
        checks: int = 0,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, "EVENT_WAIT_TIMEOUT", context)
        self.token = token
        self.checks = checks
