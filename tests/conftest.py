"""
Shared pytest fixtures for Canvas client tests.
"""

from typing import Callable, List

import httpx
import pytest

from canvas_client import CanvasClient, CanvasClientConfig
from canvas_client.utils.http_client import HttpClient


@pytest.fixture
def config():
    """Test configuration."""
    return CanvasClientConfig(
        api_host="canvas.example.edu",
        access_key="test-access-key",
        log_level="debug",
    )


@pytest.fixture
def sent_requests() -> List[httpx.Request]:
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def make_client(config, sent_requests) -> Callable[..., CanvasClient]:
    """Factory building a CanvasClient whose transport calls ``handler``."""
    clients: List[CanvasClient] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> CanvasClient:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            return handler(request)

        client = CanvasClient(config, transport=httpx.MockTransport(recording_handler))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


@pytest.fixture
def make_http_client(config, sent_requests) -> Callable[..., HttpClient]:
    """Factory building an HttpClient whose transport calls ``handler``."""
    clients: List[HttpClient] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> HttpClient:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            return handler(request)

        http_client = HttpClient(config, transport=httpx.MockTransport(recording_handler))
        clients.append(http_client)
        return http_client

    yield factory

    for http_client in clients:
        http_client.close()
