from typing import Any, Dict, Optional
from fastapi import APIRouter, Depends, Response
import logging

from ..config import settings
from ..dependencies import get_current_user, get_session_service, get_session_token
from ..application.services.session_service import SessionService
from ..schemas.auth.auth import SessionRequest, RedirectUrlResponse
from ..schemas.common.common import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Authentication"])


def _set_session_cookie(response: Response, value: str, max_age: int) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=value,
        httponly=True,
        path="/",
        samesite="none",
        secure=True,
        max_age=max_age,
    )


@router.get("/oauth/{provider}/redirect_url", response_model=RedirectUrlResponse)
async def oauth_redirect_url(provider: str, sessions: SessionService = Depends(get_session_service)):
    redirect_url = await sessions.redirect_url(provider)
    return {"redirectUrl": redirect_url}


@router.post("/sessions", response_model=SuccessResponse)
async def create_session(body: SessionRequest, response: Response, sessions: SessionService = Depends(get_session_service)):
    session_token = await sessions.start_session(body.code)
    _set_session_cookie(response, session_token, settings.SESSION_COOKIE_MAX_AGE)
    logger.info("Session created from authorization code")
    return {"success": True}


@router.get("/users/me")
async def get_me(user: Dict[str, Any] = Depends(get_current_user)):
    return user


@router.get("/logout", response_model=SuccessResponse)
async def logout(
    response: Response,
    session_token: Optional[str] = Depends(get_session_token),
    sessions: SessionService = Depends(get_session_service),
):
    await sessions.end_session(session_token)
    _set_session_cookie(response, "", 0)
    return {"success": True}
