import httpx
import pytest

from school_admin.config.settings import Settings
from school_admin.core.notifications import Notifier
from school_admin.mock_backend.main import create_app
from school_admin.mock_backend.store import MockStore
from school_admin.services.api_service import APIService

TEST_BACKEND_URL = "http://testserver"


@pytest.fixture()
def settings():
    return Settings(BACKEND_URL=TEST_BACKEND_URL, REQUEST_TIMEOUT_SECONDS=5, USE_SAMPLE_DATA_FALLBACK=True)


@pytest.fixture()
def store():
    """Seeded in-memory backend state, inspectable by the tests."""
    return MockStore().seed()


@pytest.fixture()
def backend_app(store):
    return create_app(store, seed=False)


@pytest.fixture()
def transport(backend_app):
    return httpx.ASGITransport(app=backend_app)


@pytest.fixture()
def api(settings, transport):
    """APIService talking to the in-process mock backend."""
    return APIService(settings, transport=transport)


@pytest.fixture()
def notifier():
    return Notifier()


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler):
        self.requests = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture()
def recording_transport():
    def factory(handler):
        return RecordingTransport(handler)
    return factory
