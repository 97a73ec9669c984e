# This project was developed with assistance from AI tools.
"""Shared fixtures.

Routes get their store through the ``get_store`` dependency; ``client``
overrides it with an in-memory table store so no test touches the network.
"""

import pytest
from fastapi.testclient import TestClient

from quote_api.main import app as real_app
from quote_api.services.store import get_store

from .fakes import BrokenStore, InMemoryStore


@pytest.fixture(autouse=True)
def _clean_overrides():
    """Clear app dependency overrides after each test."""
    yield
    real_app.dependency_overrides.clear()


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def client(store):
    real_app.dependency_overrides[get_store] = lambda: store
    return TestClient(real_app)


@pytest.fixture
def broken_client():
    real_app.dependency_overrides[get_store] = lambda: BrokenStore()
    return TestClient(real_app)
