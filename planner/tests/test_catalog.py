"""
Tests for the plan catalog resolver.
"""

import pytest
from pydantic import ValidationError

from planner.logic import PlanType, PLAN_TYPE_ORDER
from planner.logic.catalog import (
    InvalidPlanType,
    PLAN_CATALOG,
    get_begin_steps,
    get_plan_steps,
    parse_plan_type,
    resolve_plan_steps,
)


@pytest.mark.parametrize("plan_type", list(PlanType))
def test_every_plan_has_ordered_unique_steps(plan_type):
    steps = get_plan_steps(plan_type)
    ids = [s.id for s in steps]

    assert steps
    assert ids == sorted(ids)
    assert len(ids) == len(set(ids))


@pytest.mark.parametrize("raw", ["emergency-bagpack", "storage", "emergency-fund"])
def test_string_values_resolve(raw):
    assert get_plan_steps(raw) is PLAN_CATALOG[PlanType(raw)]


@pytest.mark.parametrize("raw", ["", "invalid-type", "Storage", "emergency_fund", None, 3])
def test_unknown_plan_type_raises(raw):
    with pytest.raises(InvalidPlanType) as exc_info:
        get_plan_steps(raw)
    assert exc_info.value.value == raw


def test_invalid_plan_type_is_a_value_error():
    with pytest.raises(ValueError):
        parse_plan_type("bunker")


def test_catalog_covers_exactly_the_plan_types():
    assert set(PLAN_CATALOG) == set(PLAN_TYPE_ORDER)


def test_resolve_reports_invalid_without_raising():
    lookup = resolve_plan_steps("bunker")
    assert not lookup.ok
    assert lookup.plan_type is None
    assert lookup.steps == ()
    assert "bunker" in lookup.error


def test_resolve_valid_plan():
    lookup = resolve_plan_steps("storage")
    assert lookup.ok
    assert lookup.plan_type == PlanType.STORAGE
    assert lookup.steps[0].title == "Basic Storage Information"


def test_begin_step_is_personal_information():
    steps = get_begin_steps()
    assert len(steps) == 1
    step = steps[0]
    assert step.id == 1
    assert step.title == "Personal Information"
    assert [f.key for f in step.fields] == ["ageRange", "dependentsCount", "livingSituation"]


def test_begin_dependents_field_serializes_input_attributes():
    dependents = get_begin_steps()[0].to_json()["fields"][1]
    assert dependents == {
        "type": "input",
        "label": "Number of Dependents",
        "key": "dependentsCount",
        "required": True,
        "inputType": "number",
        "min": 0,
        "max": 15,
        "placeholder": "e.g., 2",
    }


def test_select_fields_serialize_options_in_order():
    age = get_begin_steps()[0].to_json()["fields"][0]
    assert age["type"] == "select"
    assert "inputType" not in age
    assert age["options"][0] == {"value": "18-25", "label": "18-25 years"}
    assert age["options"][-1] == {"value": "65+", "label": "Over 65 years"}


def test_field_keys_unique_within_each_step():
    for steps in PLAN_CATALOG.values():
        for step in steps:
            keys = [f.key for f in step.fields]
            assert len(keys) == len(set(keys))


def test_catalog_entries_are_immutable():
    step = get_plan_steps(PlanType.EMERGENCY_BAGPACK)[0]
    with pytest.raises(ValidationError):
        step.title = "Changed"
    with pytest.raises(TypeError):
        PLAN_CATALOG[PlanType.STORAGE] = ()


def test_bagpack_steps_match_questionnaire():
    titles = [s.title for s in get_plan_steps("emergency-bagpack")]
    assert titles == [
        "Basic Bagpack Information",
        "Essential Documents",
        "Medical and First Aid",
        "Survival Essentials",
        "Additional Considerations",
    ]
