"""Arabic prompt templates sent to the AI provider.

Every reply is requested in Arabic. Patient context blocks fall back to
"غير محدد" (not specified) or "لا يوجد" (none) for empty profile fields.
"""
from typing import Optional

from .ports.profile_repo import ProfileRecord

NOT_SPECIFIED = "غير محدد"
NONE_RECORDED = "لا يوجد"

MEDICAL_TEST_SYSTEM_PROMPT = """أنت طبيب خبير متخصص في تحليل الفحوصات المخبرية والتقارير الطبية. قم بتحليل الصورة المرفقة واستخرج المعلومات التالية:

1. نوع الفحص
2. القيم الرئيسية والنتائج
3. تقييم للمخاطر (منخفض/متوسط/عالي)
4. التوصيات والإرشادات
5. ما إذا كان يحتاج لمراجعة طبية عاجلة

يرجى الرد باللغة العربية وبشكل واضح ومفهوم."""

CONSULTATION_SYSTEM_PROMPT = """أنت مساعد طبي ذكي متخصص في التشخيص الأولي وتقييم المخاطر الصحية. مهمتك:

1. تحليل الأعراض المذكورة
2. تقييم مستوى الخطورة (منخفض/متوسط/عالي/طارئ)
3. تقديم توصيات أولية
4. تحديد ما إذا كان يحتاج لمراجعة طبية فورية
5. اقتراح فحوصات إضافية إن لزم الأمر

مهم: هذا تقييم أولي وليس بديلاً عن الاستشارة الطبية المباشرة.
يرجى الرد باللغة العربية بشكل واضح ومطمئن."""

PREVENTIVE_PLAN_SYSTEM_PROMPT = """أنت خبير في الطب الوقائي وأسلوب الحياة الصحي. قم بإنشاء خطة وقائية شاملة ومخصصة تتضمن:

1. توصيات غذائية مفصلة
2. برنامج رياضي مناسب
3. تعديلات في نمط الحياة
4. جدول المتابعة والفحوصات الدورية
5. نصائح للوقاية من الأمراض المزمنة

يرجى تقديم خطة عملية وقابلة للتطبيق باللغة العربية."""

# Fallback texts stored when the provider answers with nothing
IMAGE_ANALYSIS_FALLBACK = "تعذر تحليل الصورة"
CONSULTATION_FALLBACK = "تعذر تحليل الأعراض"
PREVENTIVE_PLAN_FALLBACK = "تعذر إنشاء الخطة"


def _value(value, placeholder: str) -> str:
    return str(value) if value else placeholder


def medical_test_user_prompt(test_type: str) -> str:
    return f"هذا فحص من نوع: {test_type}. يرجى تحليل النتائج وإعطاء تقييم شامل."


def consultation_context(
    profile: Optional[ProfileRecord],
    age: Optional[int] = None,
    gender: Optional[str] = None,
    medical_history: Optional[str] = None,
) -> str:
    """Patient context for a symptom consultation.

    The stored profile wins; the request's own age/gender/history are only
    used when the user has no profile yet.
    """
    if profile is not None:
        return (
            "معلومات المريض:\n"
            f"- العمر: {_value(profile.age, NOT_SPECIFIED)}\n"
            f"- الجنس: {_value(profile.gender, NOT_SPECIFIED)}\n"
            f"- التاريخ المرضي العائلي: {_value(profile.family_history, NONE_RECORDED)}\n"
            f"- الأمراض المزمنة: {_value(profile.chronic_conditions, NONE_RECORDED)}\n"
            f"- الأدوية الحالية: {_value(profile.medications, NONE_RECORDED)}\n"
        )
    if age or gender or medical_history:
        return (
            "معلومات المريض:\n"
            f"- العمر: {_value(age, NOT_SPECIFIED)}\n"
            f"- الجنس: {_value(gender, NOT_SPECIFIED)}\n"
            f"- التاريخ المرضي: {_value(medical_history, NONE_RECORDED)}\n"
        )
    return ""


def consultation_user_prompt(context: str, symptoms: str) -> str:
    return (
        f"{context}\n"
        f"الأعراض الحالية: {symptoms}\n\n"
        "يرجى تحليل هذه الأعراض وتقديم تقييم شامل مع التوصيات المناسبة."
    )


def preventive_plan_user_prompt(profile: ProfileRecord) -> str:
    return (
        "معلومات المريض:\n"
        f"- العمر: {_value(profile.age, NOT_SPECIFIED)}\n"
        f"- الجنس: {_value(profile.gender, NOT_SPECIFIED)}\n"
        f"- الطول: {_value(profile.height_cm, NOT_SPECIFIED)} سم\n"
        f"- الوزن: {_value(profile.weight_kg, NOT_SPECIFIED)} كيلو\n"
        f"- التاريخ المرضي العائلي: {_value(profile.family_history, NONE_RECORDED)}\n"
        f"- الأمراض المزمنة: {_value(profile.chronic_conditions, NONE_RECORDED)}\n"
        f"- نمط الحياة: {_value(profile.lifestyle_info, NOT_SPECIFIED)}\n\n"
        "يرجى إنشاء خطة وقائية شاملة ومخصصة لهذا الشخص."
    )
