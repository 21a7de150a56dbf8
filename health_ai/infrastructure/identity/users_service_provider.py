import logging
from typing import Any, Dict, Optional

import aiohttp
from fastapi import HTTPException

from ...config import settings
from ...application.ports.identity_provider import IdentityProvider

logger = logging.getLogger(__name__)

# Status codes the users service answers for an unknown or expired session
_NO_SESSION_STATUSES = (401, 403, 404)


class UsersServiceIdentityProvider(IdentityProvider):
    """HTTP client for the external users service that owns OAuth and sessions."""

    def __init__(self, api_url: Optional[str] = None, api_key: Optional[str] = None) -> None:
        self.api_url = (api_url or settings.USERS_SERVICE_API_URL).rstrip("/")
        self.api_key = api_key or settings.USERS_SERVICE_API_KEY

    def _headers(self, session_token: Optional[str] = None) -> Dict[str, str]:
        headers = {"x-api-key": self.api_key}
        if session_token:
            headers["Authorization"] = f"Bearer {session_token}"
        return headers

    async def get_oauth_redirect_url(self, provider: str) -> str:
        async with aiohttp.ClientSession() as session:
            async with session.get(
                f"{self.api_url}/oauth/{provider}/redirect_url",
                headers=self._headers(),
            ) as resp:
                resp.raise_for_status()
                data = await resp.json()
        return data["redirect_url"]

    async def exchange_code_for_session_token(self, code: str) -> str:
        async with aiohttp.ClientSession() as session:
            async with session.post(
                f"{self.api_url}/sessions",
                json={"code": code},
                headers=self._headers(),
            ) as resp:
                if resp.status in _NO_SESSION_STATUSES or resp.status == 400:
                    logger.warning(f"Authorization code rejected by users service ({resp.status})")
                    raise HTTPException(status_code=401, detail="Invalid authorization code")
                resp.raise_for_status()
                data = await resp.json()
        return data["session_token"]

    async def get_user(self, session_token: str) -> Optional[Dict[str, Any]]:
        async with aiohttp.ClientSession() as session:
            async with session.get(
                f"{self.api_url}/users/me",
                headers=self._headers(session_token),
            ) as resp:
                if resp.status in _NO_SESSION_STATUSES:
                    return None
                resp.raise_for_status()
                return await resp.json()

    async def delete_session(self, session_token: str) -> None:
        async with aiohttp.ClientSession() as session:
            async with session.delete(
                f"{self.api_url}/sessions",
                headers=self._headers(session_token),
            ) as resp:
                if resp.status in _NO_SESSION_STATUSES:
                    return
                resp.raise_for_status()
