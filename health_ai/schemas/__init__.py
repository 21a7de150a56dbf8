# Schemas package (re-export feature modules for stable imports)
from .auth.auth import *
from .health.profile import *
from .health.consultation import *
from .common.common import *
