"""
Recommendation Engine

Scores survey answers against the fixed rule table and produces a ranked
plan recommendation. Pure: no I/O, no shared mutable state.
"""

import logging
from typing import Dict, Mapping

from .contracts import PlanRecommendation
from .constants import PlanType, PLAN_TYPE_ORDER, SCORING_RULES, REASONING_BY_PLAN
from .ranker import rank_plans, top_two

logger = logging.getLogger(__name__)


def score_answers(answers: Mapping[str, object]) -> Dict[PlanType, int]:
    """
    Accumulate points for every plan type.

    Every rule is evaluated; rules on different keys compound freely.
    Missing keys and non-string values never match.
    """
    scores: Dict[PlanType, int] = {plan: 0 for plan in PLAN_TYPE_ORDER}

    for rule in SCORING_RULES:
        value = answers.get(rule.answer_key)
        if not isinstance(value, str) or value not in rule.values:
            continue
        for plan, points in rule.points:
            scores[plan] += points

    return scores


def reasoning_for(plan: PlanType) -> str:
    return REASONING_BY_PLAN[plan]


class RecommendationEngine:
    """
    Stateless recommendation engine.

    Pipeline flow:
    1. Scoring - apply every rule to a fresh score table
    2. Ranking - stable sort by score, declaration order on ties
    3. Reasoning - fixed sentence keyed on the primary plan
    """

    version = "1.0.0"

    def score(self, answers: Mapping[str, object]) -> Dict[PlanType, int]:
        return score_answers(answers or {})

    def recommend(self, answers: Mapping[str, object]) -> PlanRecommendation:
        """
        Determine the recommended plan for a set of survey answers.

        Args:
            answers: Flat mapping of answer key to answer value

        Returns:
            PlanRecommendation with primary, secondary and reasoning
        """
        scores = self.score(answers)
        ranked = rank_plans(scores)
        primary, secondary = top_two(ranked)

        logger.debug(
            "Plan scores: %s -> primary=%s secondary=%s",
            {p.value: s for p, s in scores.items()}, primary.value, secondary.value,
        )

        return PlanRecommendation(
            primary_recommendation=primary,
            secondary_recommendation=secondary,
            reasoning=reasoning_for(primary),
            ranking=ranked,
        )


# Shared instance; safe across concurrent callers
engine = RecommendationEngine()


def determine_recommended_plan(answers: Mapping[str, object]) -> PlanRecommendation:
    """Convenience function around the shared engine."""
    return engine.recommend(answers)
