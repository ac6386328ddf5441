"""
Plan Catalog Resolver

Maps a plan type to its ordered questionnaire steps.
The table is built once at import time and never mutated.
"""

from types import MappingProxyType
from typing import Mapping, Tuple, Union

from .contracts import CatalogLookup, PlanStep
from .constants import PlanType, PLAN_TYPE_ORDER
from ..catalog import (
    BEGIN_STEPS,
    EMERGENCY_BAGPACK_STEPS,
    STORAGE_STEPS,
    EMERGENCY_FUND_STEPS,
)


class InvalidPlanType(ValueError):
    """Raised when a plan type is outside the closed PlanType set."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid plan type: {value}")


PLAN_CATALOG: Mapping[PlanType, Tuple[PlanStep, ...]] = MappingProxyType({
    PlanType.EMERGENCY_BAGPACK: EMERGENCY_BAGPACK_STEPS,
    PlanType.STORAGE: STORAGE_STEPS,
    PlanType.EMERGENCY_FUND: EMERGENCY_FUND_STEPS,
})


def _check_steps(name: str, steps: Tuple[PlanStep, ...]) -> None:
    if not steps:
        raise RuntimeError(f"Catalog '{name}' has no steps")
    ids = [s.id for s in steps]
    if ids != sorted(set(ids)):
        raise RuntimeError(f"Catalog '{name}' step ids must be unique and ascending: {ids}")
    for step in steps:
        keys = [f.key for f in step.fields]
        if len(keys) != len(set(keys)):
            raise RuntimeError(f"Catalog '{name}' step {step.id} has duplicate field keys")
        for f in step.fields:
            if f.type == "select" and not f.options:
                raise RuntimeError(f"Catalog '{name}' field '{f.key}' is a select without options")


def _check_catalog() -> None:
    missing = [p.value for p in PLAN_TYPE_ORDER if p not in PLAN_CATALOG]
    if missing:
        raise RuntimeError(f"No catalog registered for plan types: {missing}")
    _check_steps("begin", BEGIN_STEPS)
    for plan, steps in PLAN_CATALOG.items():
        _check_steps(plan.value, steps)


_check_catalog()


def parse_plan_type(value: Union[str, PlanType]) -> PlanType:
    """Validate a raw value against the closed plan type set."""
    if isinstance(value, PlanType):
        return value
    try:
        return PlanType(value)
    except ValueError:
        raise InvalidPlanType(value) from None


def get_begin_steps() -> Tuple[PlanStep, ...]:
    """Entry step of every questionnaire, independent of plan type."""
    return BEGIN_STEPS


def get_plan_steps(plan_type: Union[str, PlanType]) -> Tuple[PlanStep, ...]:
    """
    Return the ordered steps for a plan type.

    Raises:
        InvalidPlanType: plan_type is not one of the PlanType values
    """
    return PLAN_CATALOG[parse_plan_type(plan_type)]


def resolve_plan_steps(raw: str) -> CatalogLookup:
    """
    Non-raising lookup for callers that branch on the outcome,
    e.g. a route turning a path parameter into a response.
    """
    try:
        plan = parse_plan_type(raw)
    except InvalidPlanType as e:
        return CatalogLookup(error=str(e))
    return CatalogLookup(plan_type=plan, steps=PLAN_CATALOG[plan])
