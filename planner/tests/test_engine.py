"""
Tests for the recommendation engine: rule table, ranking and reasoning.
"""

import pytest

from planner.logic import (
    RecommendationEngine,
    PlanType,
    determine_recommended_plan,
    score_answers,
)
from planner.logic.constants import RECOGNIZED_ANSWER_KEYS, SCORING_RULES


BAGPACK = PlanType.EMERGENCY_BAGPACK
STORAGE = PlanType.STORAGE
FUND = PlanType.EMERGENCY_FUND


def test_empty_answers_use_declaration_order():
    rec = determine_recommended_plan({})

    assert rec.primary_recommendation == BAGPACK
    assert rec.secondary_recommendation == STORAGE
    assert "Emergency Bagpack" in rec.reasoning
    assert [s.score for s in rec.ranking] == [0, 0, 0]


def test_storage_scenario(storage_answers):
    scores = score_answers(storage_answers)
    assert scores == {BAGPACK: 5, STORAGE: 7, FUND: 0}

    rec = determine_recommended_plan(storage_answers)
    assert rec.primary_recommendation == STORAGE
    assert rec.secondary_recommendation == BAGPACK
    assert "Storage" in rec.reasoning


def test_fund_scenario(fund_answers):
    scores = score_answers(fund_answers)
    assert scores[FUND] == 12
    assert scores[BAGPACK] == 2
    assert scores[STORAGE] == 0

    rec = determine_recommended_plan(fund_answers)
    assert rec.primary_recommendation == FUND
    assert rec.secondary_recommendation == BAGPACK
    assert "Emergency Fund" in rec.reasoning


@pytest.mark.parametrize("answers, expected", [
    ({"naturalDisasterRisk": "high"}, {BAGPACK: 3, STORAGE: 2, FUND: 0}),
    ({"economicStability": "unstable"}, {BAGPACK: 0, STORAGE: 0, FUND: 3}),
    ({"livingSituation": "apartment"}, {BAGPACK: 1, STORAGE: 0, FUND: 1}),
    ({"livingSituation": "own-house"}, {BAGPACK: 0, STORAGE: 2, FUND: 0}),
    ({"storageSpace": "large"}, {BAGPACK: 0, STORAGE: 2, FUND: 0}),
    ({"storageSpace": "none"}, {BAGPACK: 1, STORAGE: 0, FUND: 1}),
    ({"incomeStability": "variable"}, {BAGPACK: 0, STORAGE: 0, FUND: 3}),
    ({"savingsLevel": "low"}, {BAGPACK: 0, STORAGE: 0, FUND: 2}),
    ({"primaryConcern": "natural-disasters"}, {BAGPACK: 2, STORAGE: 1, FUND: 0}),
    ({"primaryConcern": "job-loss"}, {BAGPACK: 0, STORAGE: 0, FUND: 2}),
])
def test_single_rule_points(answers, expected):
    assert score_answers(answers) == expected


def test_unrecognized_keys_and_values_are_ignored():
    answers = {
        "mobilityNeeds": "high",
        "naturalDisasterRisk": "HIGH",
        "storageSpace": "medium",
        "livingSituation": None,
        "savingsLevel": ["none"],
    }
    assert score_answers(answers) == {BAGPACK: 0, STORAGE: 0, FUND: 0}


def test_tie_between_storage_and_fund_keeps_declaration_order():
    # storage 2 (own-house), fund 2 (savings) -> storage wins the tie
    rec = determine_recommended_plan({"livingSituation": "own-house", "savingsLevel": "low"})
    assert rec.primary_recommendation == STORAGE
    assert rec.secondary_recommendation == FUND


def test_tie_between_bagpack_and_fund_keeps_declaration_order():
    rec = determine_recommended_plan({"livingSituation": "apartment"})
    assert rec.primary_recommendation == BAGPACK
    assert rec.secondary_recommendation == FUND


def test_secondary_can_tie_with_primary():
    rec = determine_recommended_plan({"storageSpace": "limited"})
    assert rec.ranking[0].score == rec.ranking[1].score == 1
    assert rec.primary_recommendation == BAGPACK
    assert rec.secondary_recommendation == FUND


def test_same_input_gives_identical_output(fund_answers):
    first = determine_recommended_plan(fund_answers)
    second = determine_recommended_plan(dict(fund_answers))
    assert first.model_dump_json(by_alias=True) == second.model_dump_json(by_alias=True)


def test_engine_does_not_mutate_input(storage_answers):
    snapshot = dict(storage_answers)
    RecommendationEngine().recommend(storage_answers)
    assert storage_answers == snapshot


def test_adding_a_signal_never_lowers_any_score(storage_answers):
    qualifying = {
        "economicStability": "unstable",
        "incomeStability": "unstable",
        "savingsLevel": "low",
    }
    base = score_answers(storage_answers)
    for key, value in qualifying.items():
        boosted = score_answers({**storage_answers, key: value})
        for plan in PlanType:
            assert boosted[plan] >= base[plan]


def test_every_rule_only_adds_points():
    for rule in SCORING_RULES:
        assert rule.answer_key in RECOGNIZED_ANSWER_KEYS
        assert all(points > 0 for _, points in rule.points)


def test_reasoning_depends_only_on_primary():
    narrow = determine_recommended_plan({"economicStability": "unstable"})
    wide = determine_recommended_plan({
        "economicStability": "unstable",
        "incomeStability": "unstable",
        "savingsLevel": "none",
        "primaryConcern": "job-loss",
    })
    assert narrow.primary_recommendation == wide.primary_recommendation == FUND
    assert narrow.reasoning == wide.reasoning


def test_wire_format_uses_camel_case(storage_answers):
    payload = determine_recommended_plan(storage_answers).model_dump(mode="json", by_alias=True)
    assert payload == {
        "primaryRecommendation": "storage",
        "secondaryRecommendation": "emergency-bagpack",
        "reasoning": (
            "Given your available space and stable living situation, "
            "a comprehensive Storage plan would provide the best long-term security."
        ),
    }
