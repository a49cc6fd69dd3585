"""
Canvas Client SDK - Python client for the Canvas LMS REST API.

This package provides an authenticated client for the Canvas API that follows
link-header pagination transparently and accepts request parameters in the
form-encoded bracket notation used throughout the Canvas API documentation.
"""

from typing import Any, Dict, List, Optional, Union

import httpx

from .errors import (
    ApiError,
    CanvasClientError,
    ConfigurationError,
    ParseError,
    TransportError,
    ValidationError,
)
from .models.config import CanvasClientConfig
from .utils.config_loader import load_config
from .utils.http_client import HttpClient, HttpMethod
from .utils.link_header import parse_link_header
from .utils.pagination import PaginatedSequence
from .utils.params import normalize_params

__version__ = "0.1.0"
__license__ = "MIT"

# A GET returns a single object, a plain list, or a lazy sequence when paginated.
GetResult = Union[Dict[str, Any], List[Any], PaginatedSequence, None]


class CanvasClient:
    """
    Main Canvas API client.

    Example:
        >>> client = CanvasClient(CanvasClientConfig(api_host="utexas.instructure.com",
        ...                                          access_key="abc123"))
        >>> me = client.get("/users/self")
        >>> for course in client.get("/courses?per_page=50"):
        ...     print(course["name"])
    """

    def __init__(
        self,
        config: CanvasClientConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize CanvasClient with configuration.

        Args:
            config: Client configuration including API host and access key
            transport: Optional httpx transport, mainly for tests
        """
        self.config = config
        self.http_client = HttpClient(config, transport=transport)

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    # ==================== REQUEST METHODS ====================

    def get(
        self,
        api_url: str,
        wrapper_element: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> GetResult:
        """
        Make a GET request.

        Args:
            api_url: API path, e.g. 'courses/1' or '/users/123?per_page=100'
            wrapper_element: For list endpoints that wrap their items in a named
                field (such as the Enrollment Terms API), the name of that field
            params: Optional query parameters

        Returns:
            PaginatedSequence if the response carries a link header, otherwise
            the decoded JSON body (object or list)
        """
        response = self.http_client.request("GET", api_url, params=params)
        if "link" in response.headers:
            return PaginatedSequence(response, self.http_client, wrapper_element)
        return self.http_client.decode_json(response)

    def get_all(
        self,
        api_url: str,
        wrapper_element: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Make a GET request and read every page of a paginated result.

        Args:
            api_url: API path
            wrapper_element: Name of the field wrapping list items, if any
            params: Optional query parameters

        Returns:
            List of all items for paginated endpoints, otherwise the decoded body
        """
        result = self.get(api_url, wrapper_element, params=params)
        if isinstance(result, PaginatedSequence):
            return result.to_list()
        return result

    def post(self, api_url: str, data: Optional[Dict[str, Any]] = None) -> Any:
        """
        Make a POST request with a JSON body.

        Args:
            api_url: API path
            data: Request data; bracket-notation keys are converted to nested objects

        Returns:
            Decoded JSON response
        """
        response = self.http_client.request("POST", api_url, json=normalize_params(data))
        return self.http_client.decode_json(response)

    def put(self, api_url: str, data: Optional[Dict[str, Any]] = None) -> Any:
        """
        Make a PUT request with a JSON body.

        Args:
            api_url: API path
            data: Request data; bracket-notation keys are converted to nested objects

        Returns:
            Decoded JSON response
        """
        response = self.http_client.request("PUT", api_url, json=normalize_params(data))
        return self.http_client.decode_json(response)

    def delete(self, api_url: str) -> Any:
        """
        Make a DELETE request.

        Args:
            api_url: API path

        Returns:
            Decoded JSON response, or None for an empty body
        """
        response = self.http_client.request("DELETE", api_url)
        return self.http_client.decode_json(response)

    def request(
        self,
        method: HttpMethod,
        api_url: str,
        data: Optional[Dict[str, Any]] = None,
        wrapper_element: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Generic request method.

        Args:
            method: HTTP method
            api_url: API path
            data: Request data (for POST/PUT)
            wrapper_element: Name of the field wrapping list items (for GET)
            params: Optional query parameters (for GET)

        Returns:
            Same as the corresponding verb method
        """
        method_upper = method.upper()
        if method_upper == "GET":
            return self.get(api_url, wrapper_element, params=params)
        elif method_upper == "POST":
            return self.post(api_url, data)
        elif method_upper == "PUT":
            return self.put(api_url, data)
        elif method_upper == "DELETE":
            return self.delete(api_url)
        else:
            raise ValueError(f"Unsupported HTTP method: {method}")

    normalize_params = staticmethod(normalize_params)


__all__ = [
    "ApiError",
    "CanvasClient",
    "CanvasClientConfig",
    "CanvasClientError",
    "ConfigurationError",
    "GetResult",
    "HttpClient",
    "PaginatedSequence",
    "ParseError",
    "TransportError",
    "ValidationError",
    "load_config",
    "normalize_params",
    "parse_link_header",
]
