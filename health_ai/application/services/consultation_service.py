import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from fastapi import HTTPException

from ..ports.consultation_repo import ConsultationRepository, ConsultationRecord
from ..ports.profile_repo import HealthProfileRepository
from ..ports.ai_provider import AIProvider
from .. import prompts

logger = logging.getLogger(__name__)

CONSULTATION_TYPE = "symptom_analysis"
SYMPTOMS_REQUIRED = "يرجى وصف الأعراض"

# Literal markers searched in the model's answer
HIGH_RISK_MARKERS = ("طارئ", "عاجل")  # emergency, urgent
LOW_RISK_MARKER = "منخفض"  # low


class RiskLevel(str, Enum):
    HIGH = "عالي"
    MEDIUM = "متوسط"
    LOW = "منخفض"


def extract_risk_level(text: str) -> RiskLevel:
    """Classify an AI answer by substring search; high wins over low."""
    if any(marker in text for marker in HIGH_RISK_MARKERS):
        return RiskLevel.HIGH
    if LOW_RISK_MARKER in text:
        return RiskLevel.LOW
    return RiskLevel.MEDIUM


@dataclass
class ConsultationService:
    consultation_repo: ConsultationRepository
    profile_repo: HealthProfileRepository
    ai_provider: AIProvider

    def consult(self, user_id: str, symptoms: str, age: Optional[int] = None, gender: Optional[str] = None, medical_history: Optional[str] = None) -> ConsultationRecord:
        if not symptoms or not symptoms.strip():
            raise HTTPException(status_code=400, detail=SYMPTOMS_REQUIRED)

        profile = self.profile_repo.get_for_user(user_id)
        context = prompts.consultation_context(profile, age=age, gender=gender, medical_history=medical_history)

        answer = self.ai_provider.generate_text(
            prompts.CONSULTATION_SYSTEM_PROMPT,
            prompts.consultation_user_prompt(context, symptoms),
        )
        if not answer:
            answer = prompts.CONSULTATION_FALLBACK

        risk_level = extract_risk_level(answer)
        logger.info(f"Consultation for user {user_id} classified as {risk_level.name}")

        return self.consultation_repo.create(
            user_id=user_id,
            symptoms=symptoms,
            consultation_type=CONSULTATION_TYPE,
            ai_response=answer,
            risk_level=risk_level.value,
        )
