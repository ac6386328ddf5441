"""
Ranker

Orders plan types by accumulated score.
Ties keep the fixed declaration order of PlanType.
"""

from typing import Dict, List
from .contracts import PlanScore
from .constants import PlanType, PLAN_TYPE_ORDER


def rank_plans(scores: Dict[PlanType, int]) -> List[PlanScore]:
    """
    Rank plan types by score (descending).

    sorted() is stable, so plan types with equal scores stay in
    PLAN_TYPE_ORDER.

    Args:
        scores: Score table covering every plan type

    Returns:
        List of PlanScore, highest first
    """
    table = [PlanScore(plan_type=plan, score=scores.get(plan, 0)) for plan in PLAN_TYPE_ORDER]
    return sorted(table, key=lambda x: x.score, reverse=True)


def top_two(ranked: List[PlanScore]) -> tuple:
    """Return (primary, secondary) plan types from a ranked list."""
    return ranked[0].plan_type, ranked[1].plan_type
