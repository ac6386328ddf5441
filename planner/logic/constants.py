"""
Recommendation Engine Constants

Defines the plan type enum, the additive scoring rule table, tie-break order
and the reasoning sentences used by the recommendation engine.
All values are deterministic with no AI/ML components.
"""

from enum import Enum
from typing import Dict, FrozenSet, NamedTuple, Tuple


# =============================================================================
# PLAN TYPES
# =============================================================================

class PlanType(str, Enum):
    """Closed set of emergency-preparedness plans."""
    EMERGENCY_BAGPACK = "emergency-bagpack"
    STORAGE = "storage"
    EMERGENCY_FUND = "emergency-fund"


# Declaration order doubles as the tie-break order when scores are equal
PLAN_TYPE_ORDER: Tuple[PlanType, ...] = (
    PlanType.EMERGENCY_BAGPACK,
    PlanType.STORAGE,
    PlanType.EMERGENCY_FUND,
)

PLAN_TYPE_VALUES: FrozenSet[str] = frozenset(p.value for p in PlanType)


# =============================================================================
# SCORING RULES
# =============================================================================

class ScoringRule(NamedTuple):
    """Awards `points` when answers[answer_key] is one of `values`."""
    answer_key: str
    values: FrozenSet[str]
    points: Tuple[Tuple[PlanType, int], ...]


SCORING_RULES: Tuple[ScoringRule, ...] = (
    # Natural disaster risk
    ScoringRule("naturalDisasterRisk", frozenset({"high"}),
                ((PlanType.EMERGENCY_BAGPACK, 3), (PlanType.STORAGE, 2))),
    # Economic stability
    ScoringRule("economicStability", frozenset({"unstable"}),
                ((PlanType.EMERGENCY_FUND, 3),)),
    # Living situation
    ScoringRule("livingSituation", frozenset({"apartment"}),
                ((PlanType.EMERGENCY_BAGPACK, 1), (PlanType.EMERGENCY_FUND, 1))),
    ScoringRule("livingSituation", frozenset({"own-house"}),
                ((PlanType.STORAGE, 2),)),
    # Storage space
    ScoringRule("storageSpace", frozenset({"large"}),
                ((PlanType.STORAGE, 2),)),
    ScoringRule("storageSpace", frozenset({"limited", "none"}),
                ((PlanType.EMERGENCY_BAGPACK, 1), (PlanType.EMERGENCY_FUND, 1))),
    # Financial situation
    ScoringRule("incomeStability", frozenset({"unstable", "variable"}),
                ((PlanType.EMERGENCY_FUND, 3),)),
    ScoringRule("savingsLevel", frozenset({"none", "low"}),
                ((PlanType.EMERGENCY_FUND, 2),)),
    # Primary concern
    ScoringRule("primaryConcern", frozenset({"natural-disasters"}),
                ((PlanType.EMERGENCY_BAGPACK, 2), (PlanType.STORAGE, 1))),
    ScoringRule("primaryConcern", frozenset({"economic-crisis", "job-loss"}),
                ((PlanType.EMERGENCY_FUND, 2),)),
)

RECOGNIZED_ANSWER_KEYS: FrozenSet[str] = frozenset(r.answer_key for r in SCORING_RULES)


# =============================================================================
# REASONING TEXT
# =============================================================================

REASONING_BY_PLAN: Dict[PlanType, str] = {
    PlanType.EMERGENCY_BAGPACK: (
        "Based on your location's natural disaster risk and living situation, "
        "an Emergency Bagpack would be most beneficial for immediate evacuation needs."
    ),
    PlanType.STORAGE: (
        "Given your available space and stable living situation, "
        "a comprehensive Storage plan would provide the best long-term security."
    ),
    PlanType.EMERGENCY_FUND: (
        "Considering the economic factors and your financial situation, "
        "building an Emergency Fund should be your top priority."
    ),
}
