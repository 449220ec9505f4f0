from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("STORE_BACKEND", "memory")

from api.main import create_app  # noqa: E402
from models.memory_store import MemoryDocumentStore  # noqa: E402


@pytest.fixture()
def store() -> MemoryDocumentStore:
    return MemoryDocumentStore()


@pytest.fixture()
def client(store: MemoryDocumentStore):
    app = create_app(store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def alice(client: TestClient) -> dict:
    response = client.post("/api/users", json={"username": "alice"})
    assert response.status_code == 200, response.text
    return response.json()
