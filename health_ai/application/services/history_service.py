from dataclasses import dataclass, field
from typing import List, Optional

from ..ports.profile_repo import HealthProfileRepository, ProfileRecord
from ..ports.medical_test_repo import MedicalTestRepository, MedicalTestRecord
from ..ports.consultation_repo import ConsultationRepository, ConsultationRecord
from ..ports.preventive_plan_repo import PreventivePlanRepository, PreventivePlanRecord


@dataclass
class MedicalHistory:
    profile: Optional[ProfileRecord]
    tests: List[MedicalTestRecord] = field(default_factory=list)
    consultations: List[ConsultationRecord] = field(default_factory=list)
    plans: List[PreventivePlanRecord] = field(default_factory=list)


@dataclass
class HistoryService:
    profile_repo: HealthProfileRepository
    test_repo: MedicalTestRepository
    consultation_repo: ConsultationRepository
    plan_repo: PreventivePlanRepository

    def history_for_user(self, user_id: str) -> MedicalHistory:
        # Each table is queried on its own; records carry no cross references
        return MedicalHistory(
            profile=self.profile_repo.get_for_user(user_id),
            tests=self.test_repo.list_for_user(user_id),
            consultations=self.consultation_repo.list_for_user(user_id),
            plans=self.plan_repo.list_for_user(user_id),
        )
