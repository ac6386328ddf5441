"""
Planner Logic Module

Provides the deterministic recommendation engine for emergency-preparedness
plans. The catalog resolver lives in planner.logic.catalog.
"""

from .contracts import (
    SurveyAnswers,
    PlanOption,
    PlanField,
    PlanStep,
    PlanScore,
    PlanRecommendation,
    CatalogLookup,
)
from .engine import RecommendationEngine, determine_recommended_plan, score_answers
from .constants import PlanType, PLAN_TYPE_ORDER

__all__ = [
    # Main engine
    "RecommendationEngine",
    "determine_recommended_plan",
    "score_answers",

    # Contracts
    "SurveyAnswers",
    "PlanOption",
    "PlanField",
    "PlanStep",
    "PlanScore",
    "PlanRecommendation",
    "CatalogLookup",

    # Enums
    "PlanType",
    "PLAN_TYPE_ORDER",
]
