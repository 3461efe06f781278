"""Exceptions raised by the Monzo client."""
from __future__ import annotations

from typing import Optional

from .data_models import ErrorResponse


class MonzoError(Exception):
    """Base class for every error raised by this library."""


class ConfigurationError(MonzoError):
    """Required settings are missing or invalid."""


class TransportError(MonzoError):
    """The request never produced an HTTP response (DNS, TLS, timeouts)."""

    def __init__(self, method: str, url: str, message: str):
        self.method = method
        self.url = url
        self.message = message
        super().__init__(f"{method} {url} failed: {message}")


class HttpStatusError(MonzoError):
    """The API answered with a non-success status code."""

    def __init__(self, status_code: int, body: str, error: Optional[ErrorResponse] = None):
        self.status_code = status_code
        self.body = body
        self.error = error
        detail = None
        if error is not None:
            detail = error.message or error.error_description or error.error
        super().__init__(f"Monzo API Error ({status_code}): {detail or body}")


class DeserializationError(MonzoError):
    """A successful response body did not match the expected schema."""

    def __init__(self, message: str, body: str):
        self.message = message
        self.body = body
        super().__init__(message)
