import pytest
from fastapi import HTTPException

from health_ai.application.services.session_service import SessionService


class FakeIdentity:
    def __init__(self):
        self.sessions = {"tok": {"id": "user-1", "email": "a@example.com"}}
        self.deleted = []

    async def get_oauth_redirect_url(self, provider):
        return f"https://accounts.example.com/{provider}"

    async def exchange_code_for_session_token(self, code):
        return f"session-{code}"

    async def get_user(self, session_token):
        return self.sessions.get(session_token)

    async def delete_session(self, session_token):
        self.deleted.append(session_token)


@pytest.mark.asyncio
async def test_start_session_exchanges_code():
    svc = SessionService(identity_provider=FakeIdentity())
    assert await svc.start_session("abc") == "session-abc"


@pytest.mark.asyncio
async def test_start_session_requires_code():
    svc = SessionService(identity_provider=FakeIdentity())
    with pytest.raises(HTTPException) as exc:
        await svc.start_session("")
    assert exc.value.status_code == 400
    assert exc.value.detail == "No authorization code provided"


@pytest.mark.asyncio
async def test_current_user_unknown_token_is_401():
    svc = SessionService(identity_provider=FakeIdentity())
    assert (await svc.current_user("tok"))["id"] == "user-1"
    for token in (None, "", "nope"):
        with pytest.raises(HTTPException) as exc:
            await svc.current_user(token)
        assert exc.value.status_code == 401


@pytest.mark.asyncio
async def test_end_session_only_with_token():
    identity = FakeIdentity()
    svc = SessionService(identity_provider=identity)
    await svc.end_session(None)
    await svc.end_session("tok")
    assert identity.deleted == ["tok"]
