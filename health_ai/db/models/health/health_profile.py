# health_ai/db/models/health/health_profile.py
from typing import Optional
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field
from datetime import datetime, timezone

class HealthProfile(SQLModel, table=True):
    __tablename__ = "health_profiles"
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(max_length=255, unique=True, index=True)
    age: Optional[int] = None
    gender: Optional[str] = Field(default=None, max_length=50)
    height_cm: Optional[float] = None
    weight_kg: Optional[float] = None
    family_history: Optional[str] = None
    chronic_conditions: Optional[str] = None
    medications: Optional[str] = None
    lifestyle_info: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True))
