"""HTTP error handler utilities for HttpClient.

This module turns failed HTTP responses into ApiError instances. The raw body is
captured first; structured Canvas error messages are extracted on a best-effort
basis so non-JSON error pages never break error reporting.
"""

import json
from typing import Any, List

import httpx

from ..errors import ApiError


def _collect_messages(errors: Any) -> List[str]:
    """Collect message strings from the shapes Canvas uses for ``errors``."""
    messages: List[str] = []
    if isinstance(errors, str):
        messages.append(errors)
    elif isinstance(errors, list):
        for item in errors:
            messages.extend(_collect_messages(item))
    elif isinstance(errors, dict):
        if isinstance(errors.get("message"), str):
            messages.append(errors["message"])
        else:
            # Validation errors: {"field": [{"attribute": ..., "message": ...}]}
            for value in errors.values():
                messages.extend(_collect_messages(value))
    return messages


def extract_error_messages(body: str) -> List[str]:
    """Extract error messages from a Canvas error response body.

    Handles ``{"errors": [{"message": ...}]}``, ``{"errors": {"field": [...]}}``
    and ``{"message": ...}``.

    Args:
        body: Raw response body text

    Returns:
        List of error messages, empty if the body is not a recognised JSON error

    Examples:
        >>> extract_error_messages('{"errors": [{"message": "user authorization required"}]}')
        ['user authorization required']
        >>> extract_error_messages('<html>Internal Server Error</html>')
        []
    """
    try:
        data = json.loads(body)
    except (ValueError, TypeError):
        return []

    if not isinstance(data, dict):
        return []
    if "errors" in data:
        return _collect_messages(data["errors"])
    if isinstance(data.get("message"), str):
        return [data["message"]]
    return []


def create_api_error(response: httpx.Response) -> ApiError:
    """Create ApiError from a response with status code >= 400.

    Args:
        response: The failed HTTP response

    Returns:
        ApiError carrying the status code, raw body and extracted messages
    """
    body = response.text
    return ApiError(response.status_code, body, errors=extract_error_messages(body))
