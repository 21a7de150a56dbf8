from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

import pytest
from fastapi import HTTPException

from health_ai.application.ports.profile_repo import ProfileRecord
from health_ai.application.services.consultation_service import (
    ConsultationService,
    RiskLevel,
    extract_risk_level,
)


@dataclass
class FakeConsultation:
    id: int
    user_id: str
    symptoms: str
    consultation_type: str
    ai_response: str
    risk_level: str


class FakeConsultationRepo:
    def __init__(self):
        self.rows: List[FakeConsultation] = []

    def create(self, user_id: str, symptoms: str, consultation_type: str, ai_response: str, risk_level: str):
        rec = FakeConsultation(len(self.rows) + 1, user_id, symptoms, consultation_type, ai_response, risk_level)
        self.rows.append(rec)
        return rec

    def list_for_user(self, user_id: str):
        return [r for r in self.rows if r.user_id == user_id]


class FakeProfileRepo:
    def __init__(self, profile: Optional[ProfileRecord] = None):
        self.profile = profile

    def get_for_user(self, user_id: str):
        return self.profile


class FakeAI:
    def __init__(self, answer: str):
        self.answer = answer
        self.calls = []

    def generate_text(self, system_prompt, user_prompt, image_bytes=None, mime_type=None):
        self.calls.append((system_prompt, user_prompt))
        return self.answer


def make_profile(**overrides) -> ProfileRecord:
    values = dict(
        id=1, user_id="u1", age=42, gender="ذكر", height_cm=175.0, weight_kg=80.0,
        family_history="سكري", chronic_conditions=None, medications="ميتفورمين",
        lifestyle_info=None, created_at=datetime.now(timezone.utc), updated_at=datetime.now(timezone.utc),
    )
    values.update(overrides)
    return ProfileRecord(**values)


def test_emergency_wording_is_high_risk():
    assert extract_risk_level("هذه حالة طارئة وتحتاج إلى الطوارئ") == RiskLevel.HIGH


def test_urgent_wording_is_high_risk():
    assert extract_risk_level("يرجى مراجعة الطبيب بشكل عاجل") == RiskLevel.HIGH


def test_low_wording_is_low_risk():
    assert extract_risk_level("الأعراض تشير إلى خطر منخفض") == RiskLevel.LOW


def test_high_wins_over_low():
    assert extract_risk_level("خطر منخفض عادة لكن الحالة طارئة") == RiskLevel.HIGH


def test_anything_else_is_medium():
    assert extract_risk_level("Nothing alarming here") == RiskLevel.MEDIUM
    assert extract_risk_level("") == RiskLevel.MEDIUM


def test_consult_stores_response_and_risk_level():
    repo = FakeConsultationRepo()
    ai = FakeAI("تقييم: خطر منخفض، راحة وسوائل")
    svc = ConsultationService(consultation_repo=repo, profile_repo=FakeProfileRepo(), ai_provider=ai)

    out = svc.consult("u1", "صداع خفيف")

    assert out.risk_level == "منخفض"
    assert out.consultation_type == "symptom_analysis"
    assert repo.rows[0].ai_response == "تقييم: خطر منخفض، راحة وسوائل"


def test_consult_includes_profile_context():
    ai = FakeAI("ok")
    svc = ConsultationService(
        consultation_repo=FakeConsultationRepo(),
        profile_repo=FakeProfileRepo(make_profile()),
        ai_provider=ai,
    )
    svc.consult("u1", "دوخة", age=20, gender="أنثى")

    _system, user_prompt = ai.calls[0]
    assert "العمر: 42" in user_prompt
    assert "الأدوية الحالية: ميتفورمين" in user_prompt
    # empty profile fields fall back to the "none" placeholder
    assert "الأمراض المزمنة: لا يوجد" in user_prompt
    assert "الأعراض الحالية: دوخة" in user_prompt


def test_consult_without_profile_uses_request_fields():
    ai = FakeAI("ok")
    svc = ConsultationService(consultation_repo=FakeConsultationRepo(), profile_repo=FakeProfileRepo(), ai_provider=ai)
    svc.consult("u1", "سعال", age=30, medical_history="ربو")

    _system, user_prompt = ai.calls[0]
    assert "العمر: 30" in user_prompt
    assert "الجنس: غير محدد" in user_prompt
    assert "التاريخ المرضي: ربو" in user_prompt


def test_consult_empty_answer_uses_fallback():
    svc = ConsultationService(consultation_repo=FakeConsultationRepo(), profile_repo=FakeProfileRepo(), ai_provider=FakeAI(""))
    out = svc.consult("u1", "ألم")
    assert out.ai_response == "تعذر تحليل الأعراض"
    assert out.risk_level == "متوسط"


@pytest.mark.parametrize("symptoms", [None, "", "   "])
def test_consult_requires_symptoms(symptoms):
    ai = FakeAI("ok")
    svc = ConsultationService(consultation_repo=FakeConsultationRepo(), profile_repo=FakeProfileRepo(), ai_provider=ai)
    with pytest.raises(HTTPException) as exc:
        svc.consult("u1", symptoms)
    assert exc.value.status_code == 400
    assert exc.value.detail == "يرجى وصف الأعراض"
    assert ai.calls == []
