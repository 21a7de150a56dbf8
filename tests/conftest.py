import os
import tempfile

# Settings are read at import time, so the environment goes first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="health-ai-uploads-")
os.environ["STORAGE_BACKEND"] = "local"

from typing import Callable, Dict

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from health_ai.main import app
from health_ai.database import get_session
from health_ai.dependencies import get_ai_provider, get_identity_provider, get_object_storage
from health_ai.db import models  # noqa: F401
from health_ai.infrastructure.storage.local_storage import LocalObjectStorage


class FakeIdentityProvider:
    def __init__(self):
        self.sessions = {
            "token-a": {"id": "user-a", "email": "a@example.com"},
            "token-b": {"id": "user-b", "email": "b@example.com"},
        }
        self.deleted = []

    async def get_oauth_redirect_url(self, provider):
        return f"https://accounts.example.com/{provider}/authorize"

    async def exchange_code_for_session_token(self, code):
        token = f"token-{code}"
        self.sessions[token] = {"id": f"user-{code}", "email": f"{code}@example.com"}
        return token

    async def get_user(self, session_token):
        return self.sessions.get(session_token)

    async def delete_session(self, session_token):
        self.deleted.append(session_token)
        self.sessions.pop(session_token, None)


class FakeAIProvider:
    def __init__(self):
        self.answer = "تقييم أولي: الحالة مستقرة"
        self.error = None
        self.calls = []

    def generate_text(self, system_prompt, user_prompt, image_bytes=None, mime_type=None):
        self.calls.append({
            "system_prompt": system_prompt,
            "user_prompt": user_prompt,
            "image_bytes": image_bytes,
            "mime_type": mime_type,
        })
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def identity():
    return FakeIdentityProvider()


@pytest.fixture
def ai():
    return FakeAIProvider()


@pytest.fixture
def storage(tmp_path):
    return LocalObjectStorage(root=str(tmp_path / "objects"))


@pytest.fixture
def client(engine, identity, ai, storage):
    def _get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    app.dependency_overrides[get_identity_provider] = lambda: identity
    app.dependency_overrides[get_ai_provider] = lambda: ai
    app.dependency_overrides[get_object_storage] = lambda: storage
    # https so the Secure session cookie round-trips
    with TestClient(app, base_url="https://testserver") as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> Callable[[str], Dict[str, str]]:
    def _make(token: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    return _make
