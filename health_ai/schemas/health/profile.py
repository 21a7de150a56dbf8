# health_ai/schemas/health/profile.py
from pydantic import BaseModel, Field
from typing import Optional

from ...application.ports.profile_repo import ProfileFields

class HealthProfileRequest(BaseModel):
    age: Optional[int] = Field(None, ge=0, le=150, description="Age in years")
    gender: Optional[str] = Field(None, max_length=50)
    height_cm: Optional[float] = Field(None, gt=0, description="Height in centimetres")
    weight_kg: Optional[float] = Field(None, gt=0, description="Weight in kilograms")
    family_history: Optional[str] = None
    chronic_conditions: Optional[str] = None
    medications: Optional[str] = None
    lifestyle_info: Optional[str] = None

    def to_fields(self) -> ProfileFields:
        return ProfileFields(**self.model_dump())
