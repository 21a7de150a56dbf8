# health_ai/dependencies.py
"""FastAPI dependency wiring: adapters, services and the authenticated user."""
import logging
from functools import lru_cache
from typing import Any, Dict, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session

from .config import settings
from .database import get_session
from .application.ports.ai_provider import AIProvider
from .application.ports.identity_provider import IdentityProvider
from .application.ports.object_storage import ObjectStorage
from .application.services.session_service import SessionService
from .application.services.profile_service import ProfileService
from .application.services.medical_test_service import MedicalTestService
from .application.services.consultation_service import ConsultationService
from .application.services.preventive_plan_service import PreventivePlanService
from .application.services.history_service import HistoryService
from .infrastructure.persistence.sqlalchemy.repositories.profile_repository_sql import SqlHealthProfileRepository
from .infrastructure.persistence.sqlalchemy.repositories.medical_test_repository_sql import SqlMedicalTestRepository
from .infrastructure.persistence.sqlalchemy.repositories.consultation_repository_sql import SqlConsultationRepository
from .infrastructure.persistence.sqlalchemy.repositories.preventive_plan_repository_sql import SqlPreventivePlanRepository

logger = logging.getLogger(__name__)

# Auth scheme; the session cookie is tried first
bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache()
def get_ai_provider() -> AIProvider:
    provider = settings.AI_PROVIDER.lower()
    if provider == "gemini":
        from .infrastructure.ai.gemini_provider import GeminiProvider
        return GeminiProvider()
    if provider == "openai":
        from .infrastructure.ai.openai_provider import OpenAIProvider
        return OpenAIProvider()
    raise ValueError(f"Unknown AI_PROVIDER: {settings.AI_PROVIDER}")


@lru_cache()
def get_object_storage() -> ObjectStorage:
    backend = settings.STORAGE_BACKEND.lower()
    if backend == "s3":
        from .infrastructure.storage.s3_storage import S3ObjectStorage
        return S3ObjectStorage()
    if backend == "local":
        from .infrastructure.storage.local_storage import LocalObjectStorage
        return LocalObjectStorage()
    raise ValueError(f"Unknown STORAGE_BACKEND: {settings.STORAGE_BACKEND}")


@lru_cache()
def get_identity_provider() -> IdentityProvider:
    from .infrastructure.identity.users_service_provider import UsersServiceIdentityProvider
    return UsersServiceIdentityProvider()


def get_session_service(identity_provider: IdentityProvider = Depends(get_identity_provider)) -> SessionService:
    return SessionService(identity_provider=identity_provider)


def get_session_token(request: Request, credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme)) -> Optional[str]:
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token and credentials and credentials.credentials:
        token = credentials.credentials
    return token


async def get_current_user(
    session_token: Optional[str] = Depends(get_session_token),
    sessions: SessionService = Depends(get_session_service),
) -> Dict[str, Any]:
    user = await sessions.current_user(session_token)
    logger.debug(f"Authenticated user ID: {user['id']}")
    return user


def get_current_user_id(user: Dict[str, Any] = Depends(get_current_user)) -> str:
    return str(user["id"])


def get_profile_service(session: Session = Depends(get_session)) -> ProfileService:
    return ProfileService(profile_repo=SqlHealthProfileRepository(session))


def get_medical_test_service(
    session: Session = Depends(get_session),
    ai_provider: AIProvider = Depends(get_ai_provider),
    storage: ObjectStorage = Depends(get_object_storage),
) -> MedicalTestService:
    return MedicalTestService(
        test_repo=SqlMedicalTestRepository(session),
        ai_provider=ai_provider,
        storage=storage,
    )


def get_consultation_service(
    session: Session = Depends(get_session),
    ai_provider: AIProvider = Depends(get_ai_provider),
) -> ConsultationService:
    return ConsultationService(
        consultation_repo=SqlConsultationRepository(session),
        profile_repo=SqlHealthProfileRepository(session),
        ai_provider=ai_provider,
    )


def get_preventive_plan_service(
    session: Session = Depends(get_session),
    ai_provider: AIProvider = Depends(get_ai_provider),
) -> PreventivePlanService:
    return PreventivePlanService(
        plan_repo=SqlPreventivePlanRepository(session),
        profile_repo=SqlHealthProfileRepository(session),
        ai_provider=ai_provider,
    )


def get_history_service(session: Session = Depends(get_session)) -> HistoryService:
    return HistoryService(
        profile_repo=SqlHealthProfileRepository(session),
        test_repo=SqlMedicalTestRepository(session),
        consultation_repo=SqlConsultationRepository(session),
        plan_repo=SqlPreventivePlanRepository(session),
    )
