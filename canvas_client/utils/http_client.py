"""HTTP client utility for Canvas API communication.

This module wraps ``httpx.Client`` with bearer-token authentication, API URL
construction, uniform error handling for failed responses and debug logging.
All headers are masked with DataMasker before they are logged.
"""

import logging
import time
from typing import Any, Dict, Literal, Optional

import httpx

from ..errors import ParseError
from ..models.config import CanvasClientConfig
from .data_masker import DataMasker
from .http_error_handler import create_api_error

logger = logging.getLogger(__name__)

API_V1_PREFIX = "/api/v1"

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]


class BearerAuth(httpx.Auth):
    """Attach ``Authorization: Bearer <token>`` to every outgoing request."""

    def __init__(self, token: str):
        self._auth_header = f"Bearer {token}"

    def auth_flow(self, request: httpx.Request):
        request.headers["Authorization"] = self._auth_header
        yield request


class HttpClient:
    """Synchronous HTTP client for the Canvas API.

    Every request, including continuation-page requests issued by a
    PaginatedSequence, goes through the same authenticated ``httpx.Client``.
    Responses with a status code of 400 or above raise ApiError before their
    body is decoded. Transport failures raised by httpx propagate unchanged.
    """

    def __init__(
        self,
        config: CanvasClientConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize HTTP client with configuration.

        Args:
            config: Canvas client configuration
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)

        """
        self.config = config
        self.client = httpx.Client(
            auth=BearerAuth(config.access_key),
            timeout=config.timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self.client.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def full_url(self, api_url: str) -> str:
        """Build the absolute URL for an API path.

        Args:
            api_url: API path such as 'courses/1' or '/users/123?per_page=100'

        Returns:
            Host + '/api/v1' + path, with a '/' inserted when the path lacks one

        """
        prefix = API_V1_PREFIX
        if not api_url.startswith("/"):
            prefix += "/"
        return f"{self.config.api_host}{prefix}{api_url}"

    def send(
        self,
        method: HttpMethod,
        url: str,
        json: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """Send a request to an absolute URL.

        Args:
            method: HTTP method
            url: Absolute request URL
            json: Optional JSON body (already normalized)
            params: Optional query parameters

        Returns:
            The successful httpx.Response

        Raises:
            ApiError: If the response status code is 400 or above
            httpx.TransportError: If the request could not be completed

        """
        request_url = httpx.URL(url)
        if params:
            # Add to the query string already in the API path instead of replacing it
            request_url = request_url.copy_merge_params(params)
        start_time = time.perf_counter()
        response = self.client.request(method, request_url, json=json)
        self._log_debug_if_enabled(response, start_time)

        if response.status_code >= 400:
            logger.warning(f"{method} {url} failed with HTTP {response.status_code}")
            raise create_api_error(response)
        return response

    def request(
        self,
        method: HttpMethod,
        api_url: str,
        json: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """Send a request to an API path relative to '/api/v1'.

        Args:
            method: HTTP method
            api_url: API path
            json: Optional JSON body (already normalized)
            params: Optional query parameters

        Returns:
            The successful httpx.Response

        """
        return self.send(method, self.full_url(api_url), json=json, params=params)

    @staticmethod
    def decode_json(response: httpx.Response) -> Any:
        """Decode a successful response body.

        Args:
            response: Successful HTTP response

        Returns:
            Decoded JSON value, or None for an empty body

        Raises:
            ParseError: If the body is not valid JSON

        """
        if not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ParseError(
                f"Response body is not valid JSON: {e}",
                status_code=response.status_code,
            ) from e

    def _log_debug_if_enabled(self, response: httpx.Response, start_time: float) -> None:
        """Log request details when debug logging is configured."""
        if self.config.log_level != "debug":
            return

        duration_ms = int((time.perf_counter() - start_time) * 1000)
        request = response.request
        masked_headers = DataMasker.mask_sensitive_data(dict(request.headers))
        logger.debug(
            f"{request.method} {request.url} -> {response.status_code} "
            f"({duration_ms}ms) headers={masked_headers}"
        )
