"""Shared fixtures: a camp store in a temporary directory and a test client."""

import pytest
from fastapi.testclient import TestClient

from logic.models import Hunter, Stand
from logic.store import EntitySet, JsonStore
from main import app
from server.deps import get_store


@pytest.fixture
def store(tmp_path):
    store = JsonStore(str(tmp_path / "data"))
    store.ensure_files()
    return store


@pytest.fixture
def camp(store):
    """Two hunters and three stands, nobody checked in."""
    store.save(
        EntitySet.HUNTERS,
        [
            Hunter(id=1, name="Alex", pin="1234", is_admin=True),
            Hunter(id=2, name="Sam", pin="0000"),
        ],
    )
    store.save(
        EntitySet.STANDS,
        [
            Stand(id=10, name="North Ridge"),
            Stand(id=11, name="Creek Bottom"),
            Stand(id=12, name="Oak Flat"),
        ],
    )
    return store


@pytest.fixture
def client(camp):
    app.dependency_overrides[get_store] = lambda: camp
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
