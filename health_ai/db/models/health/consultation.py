# health_ai/db/models/health/consultation.py
from typing import Optional
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field
from datetime import datetime, timezone

class Consultation(SQLModel, table=True):
    __tablename__ = "consultations"
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(max_length=255, index=True)
    symptoms: str
    consultation_type: str = Field(default="symptom_analysis", max_length=50)
    ai_response: Optional[str] = None
    risk_level: Optional[str] = Field(default=None, max_length=20)
    recommendations: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True))
