from fastapi import APIRouter, Depends

from ..dependencies import get_current_user_id, get_consultation_service
from ..application.services.consultation_service import ConsultationService
from ..schemas.health.consultation import SymptomAnalysisRequest, ConsultationResponse

router = APIRouter(prefix="/api", tags=["Consultation"])


@router.post("/consultation", response_model=ConsultationResponse)
def create_consultation(
    body: SymptomAnalysisRequest,
    current_user: str = Depends(get_current_user_id),
    consultations: ConsultationService = Depends(get_consultation_service),
):
    record = consultations.consult(
        current_user,
        body.symptoms,
        age=body.age,
        gender=body.gender,
        medical_history=body.medical_history,
    )
    return {"success": True, "response": record.ai_response, "riskLevel": record.risk_level}
