"""
Configuration loader utility.

Loads the client configuration from environment variables (and a local .env file).
"""

import os

from dotenv import load_dotenv
from pydantic import ValidationError as PydanticValidationError

from ..errors import ConfigurationError
from ..models.config import CanvasClientConfig


def load_config() -> CanvasClientConfig:
    """
    Load configuration from environment variables.

    Required environment variables:
    - CANVAS_API_HOST (e.g. 'utexas.instructure.com')
    - CANVAS_ACCESS_KEY or CANVAS_TOKEN

    Optional environment variables:
    - CANVAS_TIMEOUT (seconds, default: 30)
    - CANVAS_LOG_LEVEL (debug, info, warn, error)

    Returns:
        CanvasClientConfig instance

    Raises:
        ConfigurationError: If required environment variables are missing or invalid
    """
    load_dotenv()

    api_host = os.environ.get("CANVAS_API_HOST", "").strip()
    if not api_host:
        raise ConfigurationError("CANVAS_API_HOST environment variable is required")

    access_key = os.environ.get("CANVAS_ACCESS_KEY") or os.environ.get("CANVAS_TOKEN") or ""
    if not access_key:
        raise ConfigurationError("CANVAS_ACCESS_KEY environment variable is required")

    log_level = os.environ.get("CANVAS_LOG_LEVEL", "info").lower()
    if log_level not in ["debug", "info", "warn", "error"]:
        log_level = "info"

    timeout_str = os.environ.get("CANVAS_TIMEOUT")
    try:
        timeout = float(timeout_str) if timeout_str else 30.0
    except ValueError:
        raise ConfigurationError(f"CANVAS_TIMEOUT must be a number, got {timeout_str!r}")

    try:
        return CanvasClientConfig(
            api_host=api_host,
            access_key=access_key,
            timeout=timeout,
            log_level=log_level,
        )
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid Canvas client configuration: {e}") from e
