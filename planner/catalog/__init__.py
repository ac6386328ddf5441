# Static questionnaire definitions, one module per plan
from .begin import BEGIN_STEPS
from .bagpack import EMERGENCY_BAGPACK_STEPS
from .storage import STORAGE_STEPS
from .fund import EMERGENCY_FUND_STEPS

__all__ = [
    "BEGIN_STEPS",
    "EMERGENCY_BAGPACK_STEPS",
    "STORAGE_STEPS",
    "EMERGENCY_FUND_STEPS",
]
