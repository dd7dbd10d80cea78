# File: tests/conftest.py
import os
import tempfile

# backend.config 가 import 시점에 읽으므로 가장 먼저 설정
_TMP_DIR = tempfile.mkdtemp(prefix="adgen-test-")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_TMP_DIR, "test.db")
os.environ["JWT_SECRET"] = "test-secret"
os.environ["OPENAI_API_KEY"] = "sk-test"
os.environ.pop("GOOGLE_CLIENT_ID", None)
os.environ.pop("GOOGLE_CLIENT_SECRET", None)

import uuid  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from backend.main import app  # noqa: E402
from utils import openai_utils  # noqa: E402


@pytest.fixture
def client():
    return TestClient(app)


def _signup(client, email=None, password="pw-1234", name="Tester"):
    email = email or f"{uuid.uuid4().hex[:8]}@example.com"
    resp = client.post("/auth/signup", json={"email": email, "password": password, "name": name})
    assert resp.status_code == 200, resp.text
    return resp.json()


@pytest.fixture
def signup(client):
    return lambda **kw: _signup(client, **kw)


@pytest.fixture
def auth_headers(client):
    token = _signup(client)["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_headers(client):
    token = _signup(client)["token"]
    return {"Authorization": f"Bearer {token}"}


class FakeCompletions:
    """chat.completions.create 자리에 끼우는 가짜. 호출 인자를 기록한다."""

    def __init__(self, content="Headline: Buy Now\nBody: Great deal\nCTA: Shop", error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = type("Message", (), {"content": self.content})()
        choice = type("Choice", (), {"message": message})()
        return type("Completion", (), {"choices": [choice]})()


@pytest.fixture
def fake_openai(monkeypatch):
    completions = FakeCompletions()
    chat = type("Chat", (), {"completions": completions})()
    fake_client = type("FakeOpenAI", (), {"chat": chat})()
    monkeypatch.setattr(openai_utils, "get_client", lambda: fake_client)
    return completions
