import pytest
from fastapi.testclient import TestClient

from app.core.session_store import SessionStore, get_session_store
from app.main import app


@pytest.fixture
def store() -> SessionStore:
    return SessionStore()


@pytest.fixture
def client(store: SessionStore) -> TestClient:
    app.dependency_overrides[get_session_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
