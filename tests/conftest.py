"""
- Provide a fresh in-memory store per test whose secret is always known
- Override FastAPI's get_store so routes use that store
- Provide a client fixture (TestClient(app)) that already has the override applied
"""
import os
import pytest

from fastapi.testclient import TestClient

# Keep tests away from the network and from a developer's .env choices
os.environ.setdefault("APP_ENV", "test")
os.environ["MASTERMIND_RANDOM_SOURCE"] = "local"

from mastermind.main import app, get_store
from mastermind.players import PlayerRegistry
from mastermind.store import SessionStore

SECRET = ["red", "blue", "green", "yellow"]

def fixed_secret():
    return list(SECRET)

@pytest.fixture
def registry() -> PlayerRegistry:
    return PlayerRegistry()

@pytest.fixture
def store(registry) -> SessionStore:
    return SessionStore(registry=registry, code_generator=fixed_secret)

@pytest.fixture(autouse=True)
def override_dep(store):
    """Force the app to use our test store for every request."""
    app.dependency_overrides[get_store] = lambda: store
    yield
    app.dependency_overrides.clear()

@pytest.fixture
def client():
    return TestClient(app)
