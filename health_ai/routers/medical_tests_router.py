from typing import Optional
from fastapi import APIRouter, Depends, File, Form, UploadFile

from ..dependencies import get_current_user_id, get_medical_test_service
from ..application.services.medical_test_service import MedicalTestService

router = APIRouter(prefix="/api", tags=["Medical Tests"])


@router.post("/analyze-image")
def analyze_image(
    current_user: str = Depends(get_current_user_id),
    image: Optional[UploadFile] = File(None),
    test_type: Optional[str] = Form(None),
    test_date: Optional[str] = Form(None),
    tests: MedicalTestService = Depends(get_medical_test_service),
):
    record = tests.analyze_upload(current_user, image, test_type, test_date)
    return {"success": True, "analysis": record.ai_analysis, "test": record}
