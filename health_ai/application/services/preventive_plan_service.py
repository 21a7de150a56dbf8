from dataclasses import dataclass
from typing import Tuple
from fastapi import HTTPException

from ..ports.preventive_plan_repo import PreventivePlanRepository, PreventivePlanRecord
from ..ports.profile_repo import HealthProfileRepository
from ..ports.ai_provider import AIProvider
from .. import prompts

PLAN_TYPE = "comprehensive"
FOLLOW_UP_SCHEDULE = "مراجعة كل 3 أشهر"  # review every 3 months
PROFILE_REQUIRED = "يرجى إكمال الملف الصحي أولاً"


def split_plan_sections(text: str) -> Tuple[str, str, str]:
    """Cut plan text into diet/exercise/lifestyle thirds by character count.

    The cuts fall at n // 3 and 2n // 3, so the three parts always join back
    into the original text.
    """
    n = len(text)
    first_cut = n // 3
    second_cut = (n * 2) // 3
    return text[:first_cut], text[first_cut:second_cut], text[second_cut:]


@dataclass
class PreventivePlanService:
    plan_repo: PreventivePlanRepository
    profile_repo: HealthProfileRepository
    ai_provider: AIProvider

    def generate(self, user_id: str) -> Tuple[PreventivePlanRecord, str]:
        profile = self.profile_repo.get_for_user(user_id)
        if profile is None:
            raise HTTPException(status_code=400, detail=PROFILE_REQUIRED)

        plan_text = self.ai_provider.generate_text(
            prompts.PREVENTIVE_PLAN_SYSTEM_PROMPT,
            prompts.preventive_plan_user_prompt(profile),
        )
        if not plan_text:
            plan_text = prompts.PREVENTIVE_PLAN_FALLBACK

        diet, exercise, lifestyle = split_plan_sections(plan_text)
        record = self.plan_repo.create(
            user_id=user_id,
            plan_type=PLAN_TYPE,
            diet=diet,
            exercise=exercise,
            lifestyle=lifestyle,
            follow_up_schedule=FOLLOW_UP_SCHEDULE,
        )
        return record, plan_text
