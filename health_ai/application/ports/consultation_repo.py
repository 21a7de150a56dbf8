from typing import List, Optional, Protocol
from dataclasses import dataclass
from datetime import datetime


@dataclass
class ConsultationRecord:
    id: int
    user_id: str
    symptoms: str
    consultation_type: str
    ai_response: Optional[str]
    risk_level: Optional[str]
    recommendations: Optional[str]
    created_at: datetime
    updated_at: datetime


class ConsultationRepository(Protocol):
    def create(self, user_id: str, symptoms: str, consultation_type: str, ai_response: str, risk_level: str) -> ConsultationRecord:
        ...

    def list_for_user(self, user_id: str) -> List[ConsultationRecord]:
        ...
