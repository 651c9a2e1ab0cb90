"""Tests for routing misses and concurrent request handling."""

import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from app.api.application import create_api_application
from app.config import AppSettings


@pytest.fixture(name="client")
def fixture_client() -> TestClient:
    """Provide a test client over the demo application.

    Returns:
        TestClient: Client bound to the demo application.
    """

    return TestClient(create_api_application(AppSettings()))


@pytest.mark.parametrize(
    "path",
    [
        "/api/unknown",
        "/",
        "/api",
        "/api/",
        "/api/hello/",
        "/api/info/extra",
        "/get",
        "/health",
        "/docs",
        "/redoc",
        "/openapi.json",
    ],
)
def test_api_unknown_path_returns_not_found(client: TestClient, path: str) -> None:
    """Return HTTP 404 for paths outside the registered routes.

    Args:
        client: Demo application test client.
        path: Unregistered request path.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when status is not 404.
    """

    response = client.get(path, follow_redirects=False)

    assert response.status_code == 404


@pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"])
@pytest.mark.parametrize("path", ["/api/hello", "/api/info"])
def test_api_non_get_method_on_known_path_returns_not_found(client: TestClient, method: str, path: str) -> None:
    """Return HTTP 404 instead of 405 for method mismatches.

    Args:
        client: Demo application test client.
        method: Non-GET HTTP method.
        path: Registered request path.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when status is not 404.
    """

    response = client.request(method, path)

    assert response.status_code == 404
    if method != "HEAD":
        assert response.json() == {"detail": "Not Found"}


def test_api_unknown_method_on_unknown_path_returns_not_found(client: TestClient) -> None:
    """Return HTTP 404 for a non-GET request to an unregistered path.

    Args:
        client: Demo application test client.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when status is not 404.
    """

    response = client.post("/api/unknown")

    assert response.status_code == 404


def test_api_concurrent_hello_requests_are_independent() -> None:
    """Serve many in-flight hello requests without dropping or corrupting any.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when any concurrent response is invalid.
    """

    application = create_api_application(AppSettings())

    async def _fetch_all(request_count: int) -> list[httpx.Response]:
        transport = httpx.ASGITransport(app=application)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as async_client:
            return await asyncio.gather(*(async_client.get("/api/hello") for _ in range(request_count)))

    responses = asyncio.run(_fetch_all(50))

    assert len(responses) == 50
    for response in responses:
        assert response.status_code == 200
        payload = response.json()
        assert payload["message"] == "Hello from Spring Boot on AWS ECS Fargate!"
        assert payload["status"] == "running"
        assert payload["timestamp"]


@pytest.mark.parametrize(
    ("log_level", "expected_debug"),
    [("info", False), ("warning", False), ("debug", True), ("trace", True)],
)
def test_api_debug_mode_follows_configured_log_level(log_level: str, expected_debug: bool) -> None:
    """Enable framework debug mode only for verbose log levels.

    Args:
        log_level: Configured server log level.
        expected_debug: Expected application debug flag.

    Returns:
        None: Assertions validate application configuration.

    Raises:
        AssertionError: Raised when debug mode does not match the log level.
    """

    application = create_api_application(AppSettings(log_level=log_level))

    assert application.debug is expected_debug
