from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List

import pytest
from fastapi import HTTPException

from health_ai.application.ports.profile_repo import ProfileRecord
from health_ai.application.services.preventive_plan_service import PreventivePlanService, split_plan_sections


@dataclass
class FakePlan:
    id: int
    user_id: str
    plan_type: str
    diet_recommendations: str
    exercise_recommendations: str
    lifestyle_recommendations: str
    follow_up_schedule: str


class FakePlanRepo:
    def __init__(self):
        self.rows: List[FakePlan] = []

    def create(self, user_id, plan_type, diet, exercise, lifestyle, follow_up_schedule):
        rec = FakePlan(len(self.rows) + 1, user_id, plan_type, diet, exercise, lifestyle, follow_up_schedule)
        self.rows.append(rec)
        return rec

    def list_for_user(self, user_id):
        return [r for r in self.rows if r.user_id == user_id]


class FakeProfileRepo:
    def __init__(self, profile=None):
        self.profile = profile

    def get_for_user(self, user_id):
        return self.profile


class FakeAI:
    def __init__(self, answer):
        self.answer = answer
        self.prompts = []

    def generate_text(self, system_prompt, user_prompt, image_bytes=None, mime_type=None):
        self.prompts.append(user_prompt)
        return self.answer


def profile() -> ProfileRecord:
    now = datetime.now(timezone.utc)
    return ProfileRecord(1, "u1", 35, "أنثى", 160.0, None, None, None, None, "مكتب", now, now)


def test_split_uses_floor_cut_points():
    assert split_plan_sections("abcdefghij") == ("abc", "def", "ghij")
    assert split_plan_sections("abcdef") == ("ab", "cd", "ef")


def test_split_parts_join_back():
    text = "غذاء صحي. رياضة يومية. نوم كافٍ وتقليل التوتر."
    assert "".join(split_plan_sections(text)) == text


def test_split_short_texts():
    assert split_plan_sections("") == ("", "", "")
    assert split_plan_sections("ab") == ("", "a", "b")


def test_generate_stores_three_sections():
    repo = FakePlanRepo()
    ai = FakeAI("123456789")
    svc = PreventivePlanService(plan_repo=repo, profile_repo=FakeProfileRepo(profile()), ai_provider=ai)

    record, plan_text = svc.generate("u1")

    assert plan_text == "123456789"
    assert (record.diet_recommendations, record.exercise_recommendations, record.lifestyle_recommendations) == ("123", "456", "789")
    assert record.plan_type == "comprehensive"
    assert record.follow_up_schedule == "مراجعة كل 3 أشهر"


def test_generate_prompt_carries_profile():
    ai = FakeAI("plan")
    svc = PreventivePlanService(plan_repo=FakePlanRepo(), profile_repo=FakeProfileRepo(profile()), ai_provider=ai)
    svc.generate("u1")
    assert "الطول: 160.0 سم" in ai.prompts[0]
    assert "الوزن: غير محدد كيلو" in ai.prompts[0]
    assert "نمط الحياة: مكتب" in ai.prompts[0]


def test_generate_requires_profile():
    repo = FakePlanRepo()
    svc = PreventivePlanService(plan_repo=repo, profile_repo=FakeProfileRepo(None), ai_provider=FakeAI("plan"))
    with pytest.raises(HTTPException) as exc:
        svc.generate("u1")
    assert exc.value.status_code == 400
    assert exc.value.detail == "يرجى إكمال الملف الصحي أولاً"
    assert repo.rows == []


def test_generate_empty_answer_uses_fallback():
    svc = PreventivePlanService(plan_repo=FakePlanRepo(), profile_repo=FakeProfileRepo(profile()), ai_provider=FakeAI(None))
    _record, plan_text = svc.generate("u1")
    assert plan_text == "تعذر إنشاء الخطة"
