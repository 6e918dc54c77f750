import pytest
from fastapi.testclient import TestClient

from string_analyzer.database import StringStore, get_store
from string_analyzer.main import app


@pytest.fixture
def store():
    fresh = StringStore()
    yield fresh
    fresh.dispose()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
