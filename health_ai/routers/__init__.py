# Routers package
from . import auth_router
from . import health_profile_router
from . import medical_tests_router
from . import consultation_router
from . import preventive_plan_router
from . import history_router
from . import files_router

__all__ = [
    "auth_router",
    "health_profile_router",
    "medical_tests_router",
    "consultation_router",
    "preventive_plan_router",
    "history_router",
    "files_router",
]
