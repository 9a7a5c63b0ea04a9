from pathlib import Path

import pytest
from dotenv import load_dotenv
from fastapi.testclient import TestClient

# Load environment variables for tests
load_dotenv(Path(__file__).resolve().parents[1] / ".env.test")

from inkmatch.main import app  # noqa: E402
from inkmatch.store import MemoryDocumentStore, get_store  # noqa: E402


@pytest.fixture
def store():
    return MemoryDocumentStore()


@pytest.fixture
def client(store):
    """TestClient wired to a fresh in-memory store."""
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
