"""
Pytest configuration and fixtures for the IMG Processing client tests.
Provides a client wired to a mocked requests session and response factories.
"""

from collections.abc import Callable
from http import HTTPStatus
import json
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from img_processing import ImgProcessingClient

TEST_API_KEY = "test_0123456789abcdef"
BASE_URL = "https://api.img-processing.com/"


# ============================================================================
# Response Factories
# ============================================================================


def build_response(
    status: int = 200,
    *,
    json_body: Any = None,
    content: bytes | None = None,
    url: str = f"{BASE_URL}v1/images",
) -> requests.Response:
    """Build a real `requests.Response` without touching the network."""
    response = requests.Response()
    response.status_code = status
    response.url = url
    response.reason = HTTPStatus(status).phrase

    if json_body is not None:
        response._content = json.dumps(json_body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = content or b""

    return response


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    """
    Helper to build fake HTTP responses.

    Usage:
        response = make_response(200, json_body={"id": "image_1"})
    """
    return build_response


@pytest.fixture
def make_image_payload() -> Callable[..., dict[str, Any]]:
    """
    Helper to build an image body as returned by the API.

    Usage:
        payload = make_image_payload(id="image_abc", width=300)
    """

    def _make(**overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "id": "image_abcdefghijklmnopqrstuvwx",
            "name": "test_image",
            "url": None,
            "width": 1200,
            "height": 630,
            "format": "jpeg",
            "size": 48213,
            "created_at": "2024-01-15T10:00:00.000Z",
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def validation_error_body() -> dict[str, Any]:
    return {
        "type": "https://docs.img-processing.com/errors/validation-error",
        "error": "Validation Error",
        "status": 422,
        "message": "The request body is invalid",
        "errors": ["name is required", "image must be a valid image file"],
    }


# ============================================================================
# Client Fixtures
# ============================================================================


@pytest.fixture
def session() -> requests.Session:
    """Real session whose `request` method is replaced by a mock."""
    _session = requests.Session()
    _session.request = MagicMock(name="request")  # type: ignore[method-assign]
    return _session


@pytest.fixture
def client(session) -> ImgProcessingClient:
    return ImgProcessingClient(TEST_API_KEY, session=session)


@pytest.fixture
def respond(session) -> Callable[..., None]:
    """
    Helper to queue the responses returned by the mocked session, in order.

    Usage:
        respond(make_response(200, json_body=...), make_response(204))
    """

    def _respond(*responses: requests.Response) -> None:
        session.request.side_effect = list(responses)

    return _respond


@pytest.fixture
def image(client, session, respond, make_response, make_image_payload):
    """An image bound to the test client, created from a URL."""
    respond(make_response(201, json_body=make_image_payload()))
    created = client.create_image_from_url(
        url="https://storage.img-processing.com/og-image.jpg",
        name="test_image",
    )
    session.request.reset_mock()
    return created


@pytest.fixture
def last_request(session) -> Callable[[], tuple[str, str, dict[str, Any]]]:
    """
    Helper returning the method, URL and keyword arguments of the last request sent.

    Usage:
        method, url, kwargs = last_request()
    """

    def _last() -> tuple[str, str, dict[str, Any]]:
        call = session.request.call_args
        method, url = call.args
        return method, url, call.kwargs

    return _last


# ============================================================================
# Sample Image Data
# ============================================================================


@pytest.fixture
def sample_image_binary() -> bytes:
    """Sample binary image data (1x1 PNG)."""
    import base64

    png_base64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
    return base64.b64decode(png_base64)


@pytest.fixture
def sample_jpeg_binary() -> bytes:
    """Sample binary JPEG data (minimal valid JPEG)."""
    return (
        b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00"
        b"\xff\xdb\x00C\x00\x08\x06\x06\x07\x06\x05\x08\x07\x07\x07\t\t\x08\n\x0c"
        b"\x14\r\x0c\x0b\x0b\x0c\x19\x12\x13\x0f\x14\x1d\x1a\x1f\x1e\x1d\x1a\x1c"
        b"\x1c $.' \",#\x1c\x1c(7),01444\x1f'9=82<.342\xff\xc0\x00\x0b\x08"
        b"\x00\x01\x00\x01\x01\x01\x11\x00\xff\xc4\x00\x14\x00\x01\x00\x00\x00"
        b"\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\t\xff\xc4\x00\x14\x10"
        b"\x01\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00"
        b"\xff\xda\x00\x08\x01\x01\x00\x00?\x00\x7f\x00\xff\xd9"
    )


@pytest.fixture
def sample_svg_binary() -> bytes:
    return b'<svg xmlns="http://www.w3.org/2000/svg" width="1" height="1"></svg>'
