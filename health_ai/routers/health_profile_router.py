from fastapi import APIRouter, Depends
import logging

from ..dependencies import get_current_user_id, get_profile_service
from ..application.services.profile_service import ProfileService
from ..schemas.health.profile import HealthProfileRequest
from ..schemas.common.common import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Health Profile"])


@router.get("/health-profile")
def get_health_profile(
    current_user: str = Depends(get_current_user_id),
    profiles: ProfileService = Depends(get_profile_service),
):
    """Latest profile of the caller, or null when none was saved yet."""
    return profiles.get_profile(current_user)


@router.post("/health-profile", response_model=SuccessResponse)
def save_health_profile(
    body: HealthProfileRequest,
    current_user: str = Depends(get_current_user_id),
    profiles: ProfileService = Depends(get_profile_service),
):
    profiles.save_profile(current_user, body.to_fields())
    logger.info(f"Saved health profile for user {current_user}")
    return {"success": True}
