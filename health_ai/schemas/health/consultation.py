# health_ai/schemas/health/consultation.py
from pydantic import BaseModel, Field
from typing import Optional

class SymptomAnalysisRequest(BaseModel):
    # Emptiness is checked by the service so the message stays in Arabic
    symptoms: Optional[str] = Field(None, description="Free-text description of the symptoms")
    age: Optional[int] = Field(None, ge=0, le=150)
    gender: Optional[str] = None
    medical_history: Optional[str] = None

class ConsultationResponse(BaseModel):
    success: bool
    response: str
    riskLevel: str
