"""
Pytest configuration and shared fixtures.
"""

import httpx
import pytest

UPSTREAM_URL = "https://the-one-api.dev/v2/book?limit=100"


@pytest.fixture
def upstream_url():
    """URL the service is expected to call."""
    return UPSTREAM_URL


@pytest.fixture
def sample_upstream_payload():
    """Upstream envelope as returned by the-one-api.dev."""
    return {
        "docs": [
            {"_id": "5cf5805fb53e011a64671582", "name": "The Fellowship Of The Ring"},
            {"_id": "5cf58077b53e011a64671583", "name": "The Two Towers"},
            {"_id": "5cf58080b53e011a64671584", "name": "The Return Of The King"},
        ],
        "total": 3,
        "limit": 100,
        "offset": 0,
        "page": 1,
        "pages": 1
    }


@pytest.fixture
def recorded_requests():
    """Requests seen by the fake upstream."""
    return []


@pytest.fixture
def upstream_responding(recorded_requests):
    """
    Build a fake upstream handler.

    Call with a status code and a JSON body, a raw ``text`` body, or with
    ``raises`` set to an exception to simulate a transport failure.
    """
    def factory(status_code=200, json=None, text=None, raises=None):
        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            if raises is not None:
                raise raises
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=json)
        return handler
    return factory


@pytest.fixture
def upstream_client():
    """Build an async HTTP client whose requests are answered by a handler."""
    def factory(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return factory
