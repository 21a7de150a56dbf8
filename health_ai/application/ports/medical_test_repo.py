from typing import List, Optional, Protocol
from dataclasses import dataclass
from datetime import datetime


@dataclass
class MedicalTestRecord:
    id: int
    user_id: str
    test_type: str
    test_date: Optional[str]
    image_url: Optional[str]
    original_filename: Optional[str]
    ai_analysis: Optional[str]
    key_findings: Optional[str]
    risk_assessment: Optional[str]
    created_at: datetime
    updated_at: datetime


class MedicalTestRepository(Protocol):
    def create(self, user_id: str, test_type: str, test_date: str, image_url: str, original_filename: str, ai_analysis: str) -> MedicalTestRecord:
        ...

    def list_for_user(self, user_id: str) -> List[MedicalTestRecord]:
        ...
