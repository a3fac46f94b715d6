import os
import tempfile

import pytest

# Keep the module-level stores away from the working tree before anything imports them
_STORE_DIR = tempfile.mkdtemp(prefix="kbdesk-tests-")
os.environ.setdefault("KB_STORE_PATH", os.path.join(_STORE_DIR, "knowledge_base.json"))
os.environ.setdefault("QUEUE_STORE_PATH", os.path.join(_STORE_DIR, "queue_store.json"))

from fastapi.testclient import TestClient  # noqa: E402

import main  # noqa: E402
from knowledge_base import KnowledgeBase  # noqa: E402
from queue_manager import RequestQueue  # noqa: E402

ADMIN_KEY = "test-admin-key"


@pytest.fixture
def kb(monkeypatch):
    store = KnowledgeBase()
    monkeypatch.setattr(main, "knowledge_base", store)
    return store


@pytest.fixture
def queue(monkeypatch):
    q = RequestQueue()
    monkeypatch.setattr(main, "request_queue", q)
    return q


@pytest.fixture
def alerts_sent(monkeypatch):
    sent = []
    monkeypatch.setattr(main, "send_high_priority_alert", lambda data: sent.append(data) or True)
    return sent


@pytest.fixture
def client(kb, queue, alerts_sent, monkeypatch):
    monkeypatch.setenv("ADMIN_API_KEY", ADMIN_KEY)
    return TestClient(main.app)


@pytest.fixture
def admin_headers():
    return {"X-Admin-Key": ADMIN_KEY}
