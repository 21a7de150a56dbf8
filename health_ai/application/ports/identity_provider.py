from typing import Any, Dict, Optional, Protocol


class IdentityProvider(Protocol):
    async def get_oauth_redirect_url(self, provider: str) -> str:
        ...

    async def exchange_code_for_session_token(self, code: str) -> str:
        ...

    async def get_user(self, session_token: str) -> Optional[Dict[str, Any]]:
        ...

    async def delete_session(self, session_token: str) -> None:
        ...
