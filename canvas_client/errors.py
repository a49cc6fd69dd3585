"""
SDK exceptions and error handling.

This module defines custom exceptions for the Canvas client SDK.
"""

from typing import List, Optional

import httpx

# Transport failures (connection refused, timeouts, TLS errors) are raised by
# httpx and propagate to the caller unchanged.
TransportError = httpx.TransportError


class CanvasClientError(Exception):
    """Base exception for Canvas client SDK errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        """
        Initialize Canvas client error.

        Args:
            message: Error message
            status_code: HTTP status code if applicable
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ApiError(CanvasClientError):
    """Raised when the API answers with an HTTP status of 400 or above."""

    def __init__(self, status_code: int, body: str, errors: Optional[List[str]] = None):
        """
        Initialize API error.

        Args:
            status_code: HTTP status code of the failed response
            body: Raw response body text (never JSON-decoded here)
            errors: Error messages extracted from a structured error body
        """
        super().__init__(f"Error {status_code}: {body}", status_code=status_code)
        self.body = body
        self.errors = errors if errors is not None else []


class ParseError(CanvasClientError):
    """Raised when a response header or body cannot be interpreted."""

    pass


class ValidationError(CanvasClientError):
    """Raised when request parameters are malformed."""

    pass


class ConfigurationError(CanvasClientError):
    """Raised when configuration is invalid."""

    pass
