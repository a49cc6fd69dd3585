"""
Configuration types for the Canvas client SDK.

This module contains the Pydantic model that defines the client configuration.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_SCHEME = "https://"


class CanvasClientConfig(BaseModel):
    """Main Canvas client configuration.

    Required fields:
    - api_host: Hostname or base URL of the Canvas instance
      (e.g. 'utexas.instructure.com' or 'http://local.canvas/')
    - access_key: Access token used as the bearer credential

    Optional fields:
    - timeout: Transport timeout in seconds
    - log_level: Logging level (debug, info, warn, error)
    """

    api_host: str = Field(..., description="Canvas host, normalized to include a scheme")
    access_key: str = Field(..., description="Bearer token sent with every request")
    timeout: float = Field(default=30.0, gt=0, description="Transport timeout in seconds")
    log_level: Literal["debug", "info", "warn", "error"] = Field(
        default="info", description="Log level"
    )

    class Config:
        frozen = True

    @field_validator("api_host")
    @classmethod
    def normalize_api_host(cls, value: str) -> str:
        """Prefix the host with https:// when no scheme is given."""
        value = value.strip()
        if not value:
            raise ValueError("api_host must not be empty")
        if "://" not in value:
            value = DEFAULT_SCHEME + value
        return value.rstrip("/")

    @field_validator("access_key")
    @classmethod
    def require_access_key(cls, value: str) -> str:
        """Reject an empty access key."""
        if not value.strip():
            raise ValueError("access_key must not be empty")
        return value
