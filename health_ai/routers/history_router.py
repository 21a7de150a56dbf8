from fastapi import APIRouter, Depends

from ..dependencies import get_current_user_id, get_history_service
from ..application.services.history_service import HistoryService

router = APIRouter(prefix="/api", tags=["Medical History"])


@router.get("/medical-history")
def get_medical_history(
    current_user: str = Depends(get_current_user_id),
    history: HistoryService = Depends(get_history_service),
):
    """Profile, tests, consultations and plans of the caller, newest first."""
    return history.history_for_user(current_user)
