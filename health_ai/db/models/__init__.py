# Models package (re-export feature modules for stable imports)
from .health.health_profile import HealthProfile
from .health.medical_test import MedicalTest
from .health.consultation import Consultation
from .health.preventive_plan import PreventivePlan

__all__ = [
    "HealthProfile",
    "MedicalTest",
    "Consultation",
    "PreventivePlan",
]
