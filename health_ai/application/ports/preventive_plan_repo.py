from typing import List, Optional, Protocol
from dataclasses import dataclass
from datetime import datetime


@dataclass
class PreventivePlanRecord:
    id: int
    user_id: str
    plan_type: str
    diet_recommendations: Optional[str]
    exercise_recommendations: Optional[str]
    lifestyle_recommendations: Optional[str]
    follow_up_schedule: Optional[str]
    created_at: datetime
    updated_at: datetime


class PreventivePlanRepository(Protocol):
    def create(self, user_id: str, plan_type: str, diet: str, exercise: str, lifestyle: str, follow_up_schedule: str) -> PreventivePlanRecord:
        ...

    def list_for_user(self, user_id: str) -> List[PreventivePlanRecord]:
        ...
