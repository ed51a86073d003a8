import os
import sys

import pytest

# Ensure imports like `from app.main import create_app` work when pytest is run from repo root
BACKEND_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from fastapi.testclient import TestClient  # noqa: E402

from catalog.images import InMemoryImageHost  # noqa: E402
from catalog.seed import seed_store  # noqa: E402
from catalog.store import InMemoryLocationStore  # noqa: E402

ADMIN_KEY = "test-admin-key"


@pytest.fixture
def admin_headers(monkeypatch):
    monkeypatch.setenv("ADMIN_API_KEY", ADMIN_KEY)
    return {"X-Admin-Key": ADMIN_KEY}


@pytest.fixture
def store():
    s = InMemoryLocationStore()
    seed_store(s)
    return s


@pytest.fixture
def image_host():
    return InMemoryImageHost(base_url="https://img.test")


@pytest.fixture
def app(store, image_host):
    from app.main import create_app

    return create_app(store=store, image_host=image_host)


@pytest.fixture
def client(app):
    return TestClient(app)
