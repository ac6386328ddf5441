"""
Data Contracts for the Planner

Defines Pydantic models for the questionnaire catalog (PlanStep, PlanField)
and the recommendation output. These contracts are the API boundary for the
recommendation engine and the catalog resolver.
"""

from typing import Dict, List, Literal, Optional, Tuple
from pydantic import BaseModel, Field

from .constants import PlanType


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

# Flat mapping of answer key to answer value, e.g. {"storageSpace": "large"}.
# Absent keys carry no signal; unknown keys are ignored.
SurveyAnswers = Dict[str, object]


# =============================================================================
# CATALOG CONTRACTS
# =============================================================================

class PlanOption(BaseModel):
    """One choice of a select field."""
    value: str
    label: str

    class Config:
        frozen = True


class PlanField(BaseModel):
    """
    One question within a step.
    Select fields carry options; input fields may carry inputType/min/max/placeholder.
    """
    type: Literal["select", "input"]
    label: str
    key: str
    required: bool = True

    # select only
    options: Optional[Tuple[PlanOption, ...]] = None

    # input only
    input_type: Optional[str] = Field(default=None, alias="inputType")
    min: Optional[int] = None
    max: Optional[int] = None
    placeholder: Optional[str] = None

    class Config:
        frozen = True
        populate_by_name = True


class PlanStep(BaseModel):
    """One screen of related questions. `id` is ascending within a plan."""
    id: int
    title: str
    fields: Tuple[PlanField, ...] = ()

    class Config:
        frozen = True

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CatalogLookup(BaseModel):
    """
    Result of resolving a raw plan-type string.
    `error` is set only when the plan type is outside the closed set.
    """
    plan_type: Optional[PlanType] = None
    steps: Tuple[PlanStep, ...] = ()
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class PlanScore(BaseModel):
    """Accumulated points for a single plan type."""
    plan_type: PlanType
    score: int = Field(ge=0)


class PlanRecommendation(BaseModel):
    """
    Output contract for the recommendation engine.
    """
    primary_recommendation: PlanType = Field(alias="primaryRecommendation")
    secondary_recommendation: PlanType = Field(alias="secondaryRecommendation")
    reasoning: str

    # Ranked scores, highest first (diagnostics only; not part of the wire format)
    ranking: List[PlanScore] = Field(default_factory=list, exclude=True)

    class Config:
        populate_by_name = True
