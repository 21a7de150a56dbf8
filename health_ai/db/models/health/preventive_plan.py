# health_ai/db/models/health/preventive_plan.py
from typing import Optional
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field
from datetime import datetime, timezone

class PreventivePlan(SQLModel, table=True):
    __tablename__ = "preventive_plans"
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(max_length=255, index=True)
    plan_type: str = Field(default="comprehensive", max_length=50)
    diet_recommendations: Optional[str] = None
    exercise_recommendations: Optional[str] = None
    lifestyle_recommendations: Optional[str] = None
    follow_up_schedule: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True))
