"""Pytest fixtures: fake HTTP transport and clock for the Spotify services."""

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.spotify_catalog_service import SpotifyCatalogClient, get_catalog_client
from app.services.spotify_token_service import SpotifyTokenCache, get_token_cache


class DummyResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self.text is not None:
            raise ValueError(f"Expecting value: {self.text!r}")
        return self._payload


class DummySession:
    """Stands in for requests.Session. Replies are queued per URL; the last one repeats."""

    def __init__(self):
        self.calls = []
        self.replies = {}

    def reply(self, url, response):
        self.replies.setdefault(url, []).append(response)

    def _next(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        queue = self.replies.get(url)
        if not queue:
            raise AssertionError(f"unexpected {method} {url}")
        response = queue[0] if len(queue) == 1 else queue.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def post(self, url, **kwargs):
        return self._next("POST", url, **kwargs)

    def get(self, url, **kwargs):
        return self._next("GET", url, **kwargs)

    def calls_to(self, url):
        return [c for c in self.calls if c["url"] == url]


class FakeClock:
    def __init__(self, now=1_000_000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


TOKEN_URL = "https://accounts.test/api/token"
API_BASE = "https://api.test/v1"
SEARCH_URL = f"{API_BASE}/search"


def token_reply(access_token="tok-1", expires_in=3600, token_type="Bearer"):
    return DummyResponse(200, {
        "access_token": access_token,
        "token_type": token_type,
        "expires_in": expires_in,
    })


@pytest.fixture
def session():
    return DummySession()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def token_cache(session, clock):
    return SpotifyTokenCache(
        client_id="client-id",
        client_secret="client-secret",
        session=session,
        token_url=TOKEN_URL,
        clock=clock,
    )


@pytest.fixture
def catalog(session):
    return SpotifyCatalogClient(session=session, api_base=API_BASE)


@pytest.fixture
def client(token_cache, catalog):
    app.dependency_overrides[get_token_cache] = lambda: token_cache
    app.dependency_overrides[get_catalog_client] = lambda: catalog
    yield TestClient(app)
    app.dependency_overrides.clear()
