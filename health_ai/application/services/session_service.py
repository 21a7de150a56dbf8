from typing import Any, Dict, Optional
from dataclasses import dataclass
from fastapi import HTTPException

from ..ports.identity_provider import IdentityProvider


@dataclass
class SessionService:
    identity_provider: IdentityProvider

    async def redirect_url(self, provider: str) -> str:
        return await self.identity_provider.get_oauth_redirect_url(provider)

    async def start_session(self, code: Optional[str]) -> str:
        if not code:
            raise HTTPException(status_code=400, detail="No authorization code provided")
        return await self.identity_provider.exchange_code_for_session_token(code)

    async def current_user(self, session_token: Optional[str]) -> Dict[str, Any]:
        if not session_token:
            raise HTTPException(status_code=401, detail="Unauthorized")
        user = await self.identity_provider.get_user(session_token)
        if not user or not user.get("id"):
            raise HTTPException(status_code=401, detail="Unauthorized")
        return user

    async def end_session(self, session_token: Optional[str]) -> None:
        if session_token:
            await self.identity_provider.delete_session(session_token)
