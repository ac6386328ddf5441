from typing import Tuple

from ..logic.contracts import PlanStep
from .builders import input_field, select_field

BEGIN_STEPS: Tuple[PlanStep, ...] = (
    PlanStep(
        id=1,
        title="Personal Information",
        fields=(
            select_field("Age Range", "ageRange", [
                ("18-25", "18-25 years"),
                ("26-35", "26-35 years"),
                ("36-50", "36-50 years"),
                ("51-65", "51-65 years"),
                ("65+", "Over 65 years"),
            ]),
            input_field(
                "Number of Dependents", "dependentsCount",
                input_type="number", min=0, max=15, placeholder="e.g., 2",
            ),
            select_field("Living Situation", "livingSituation", [
                ("own-house", "Own House"),
                ("rent-house", "Rented House"),
                ("apartment", "Apartment"),
                ("shared", "Shared Housing"),
                ("other", "Other"),
            ]),
        ),
    ),
)
