from fastapi import APIRouter, Depends

from ..dependencies import get_current_user_id, get_preventive_plan_service
from ..application.services.preventive_plan_service import PreventivePlanService

router = APIRouter(prefix="/api", tags=["Preventive Plan"])


@router.post("/preventive-plan")
def create_preventive_plan(
    current_user: str = Depends(get_current_user_id),
    plans: PreventivePlanService = Depends(get_preventive_plan_service),
):
    _record, plan_text = plans.generate(current_user)
    return {"success": True, "plan": plan_text}
