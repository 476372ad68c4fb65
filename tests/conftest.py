"""Pytest fixtures and shared test configuration.

Fixtures:
    - events: Ordered log of storage removals and navigations
    - storage: Durable storage that records removals into ``events``
    - navigator: Navigator that records redirects into ``events``
    - config: AppConfig pointing at a test backend URL
    - session: SessionStore over ``storage``
    - make_client: Builds an ApiClient over a given httpx transport
    - backend / backend_client: Fake backend and a client wired to it
"""

from collections.abc import Callable

import httpx
import pytest

from docdesk.client.api import ApiClient
from docdesk.config import AppConfig
from docdesk.session.store import SessionStore
from tests.fake_backend import FakeBackend

TEST_API_URL = "http://backend.test"


class RecordingStorage(dict):
    """Dict-backed durable storage that logs every removal."""

    def __init__(self, events: list[tuple[str, str]]) -> None:
        super().__init__()
        self.events = events

    def pop(self, key, *default):
        if key in self:
            self.events.append(("remove", key))
        return super().pop(key, *default)


class RecordingNavigator:
    """Navigator that logs every redirect."""

    def __init__(self, events: list[tuple[str, str]]) -> None:
        self.events = events
        self.paths: list[str] = []

    def navigate(self, path: str) -> None:
        self.events.append(("navigate", path))
        self.paths.append(path)


@pytest.fixture
def events() -> list[tuple[str, str]]:
    return []


@pytest.fixture
def storage(events: list[tuple[str, str]]) -> RecordingStorage:
    return RecordingStorage(events)


@pytest.fixture
def navigator(events: list[tuple[str, str]]) -> RecordingNavigator:
    return RecordingNavigator(events)


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(api_base_url=TEST_API_URL, storage_secret="test-secret", request_timeout=None)


@pytest.fixture
def session(storage: RecordingStorage) -> SessionStore:
    return SessionStore(storage)


@pytest.fixture
def auth_payload() -> dict:
    """Login response used across tests."""
    return {
        "access_token": "tok1",
        "user": {"id": "1", "username": "A", "email": "a@b.com", "role": "empleado"},
    }


@pytest.fixture
def signed_in(session: SessionStore, auth_payload: dict) -> SessionStore:
    session.login(auth_payload)
    return session


@pytest.fixture
def make_client(
    config: AppConfig, session: SessionStore, navigator: RecordingNavigator
) -> Callable[[httpx.AsyncBaseTransport], ApiClient]:
    def factory(transport: httpx.AsyncBaseTransport) -> ApiClient:
        return ApiClient(config, session, navigator, transport=transport)

    return factory


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def backend_client(backend: FakeBackend, make_client) -> ApiClient:
    """ApiClient that talks to the fake backend in-process."""
    return make_client(httpx.ASGITransport(app=backend.app))
