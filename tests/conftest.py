"""
Pytest configuration and shared fixtures for SwissKnife tests.
"""

import tempfile
from pathlib import Path
from typing import Callable, Generator, List, Optional

import httpx
import pytest


def make_transport(
    status_code: int = 200,
    text: str = "",
    sent: Optional[List[httpx.Request]] = None,
) -> httpx.MockTransport:
    """
    Build a MockTransport that answers every POST with a fixed response.

    Args:
        status_code: Status code of the canned response.
        text: Body of the canned response.
        sent: Optional list that receives every request the transport sees.

    Returns:
        MockTransport usable by both httpx.Client and httpx.AsyncClient.
    """
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        if sent is not None:
            sent.append(request)
        return httpx.Response(status_code, text=text)

    return httpx.MockTransport(handler)


def echo_url_transport(sent: Optional[List[httpx.Request]] = None) -> httpx.MockTransport:
    """MockTransport that answers with {"url": <requested url>}."""
    def handler(request: httpx.Request) -> httpx.Response:
        if sent is not None:
            sent.append(request)
        return httpx.Response(200, json={"url": str(request.url)})

    return httpx.MockTransport(handler)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory that is cleaned up after test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sent_requests() -> List[httpx.Request]:
    """Collects requests seen by a mock transport."""
    return []


@pytest.fixture
def client_factory() -> Generator[Callable[..., httpx.Client], None, None]:
    """
    Create httpx.Client instances that are closed after the test.

    Yields:
        Callable accepting httpx.Client keyword arguments.
    """
    clients: List[httpx.Client] = []

    def factory(**kwargs) -> httpx.Client:
        client = httpx.Client(**kwargs)
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


@pytest.fixture
def mock_transport() -> Callable[..., httpx.MockTransport]:
    """Factory for fixed-response transports (see make_transport)."""
    return make_transport


@pytest.fixture
def echo_transport() -> Callable[..., httpx.MockTransport]:
    """Factory for URL-echoing transports (see echo_url_transport)."""
    return echo_url_transport
