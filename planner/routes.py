"""
Plan API Routes

Exposes the questionnaire catalog and the recommendation engine via REST API.
All routes require a bearer token.
"""

import logging
from typing import Optional, List, Dict, Any
from fastapi import APIRouter, Depends, HTTPException, Body
from pydantic import BaseModel, Field

from utils.auth_deps import auth_user
from .logic.engine import engine
from .logic.catalog import get_begin_steps, resolve_plan_steps
from .logic.contracts import PlanRecommendation
from .ai.generator import generator, TextGenerationUnavailable, TextGenerationError
from .ai.prompt_builder import build_plan_prompt, build_system_prompt

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/plans", tags=["plans"], dependencies=[Depends(auth_user)])


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class PlanGenerationRequest(BaseModel):
    """Request body for AI plan generation."""
    location: Optional[str] = Field(default=None, examples=["urban"])
    type: Optional[str] = Field(default=None, examples=["earthquake"])
    size: Optional[str] = Field(default=None, examples=["family of 4"])
    specificNeeds: Optional[str] = Field(default=None, examples=["elderly care, pet care"])


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.get("/begin", summary="Get initial assessment steps")
def begin_steps() -> List[Dict[str, Any]]:
    return _serialize_steps(get_begin_steps())


@router.get("/{planType}/steps", summary="Get steps for a specific plan type")
def plan_steps(planType: str) -> List[Dict[str, Any]]:
    """
    Return the questionnaire for one of `emergency-bagpack`, `storage`
    or `emergency-fund`. Any other value is a 404.
    """
    lookup = resolve_plan_steps(planType)
    if not lookup.ok:
        raise HTTPException(status_code=404, detail=lookup.error)
    return _serialize_steps(lookup.steps)


@router.post("/recommend", summary="Get plan recommendation from survey answers")
def recommend(
    answers: Dict[str, Any] = Body(
        ...,
        examples=[{
            "naturalDisasterRisk": "high",
            "livingSituation": "apartment",
            "storageSpace": "limited",
            "primaryConcern": "natural-disasters",
        }],
    ),
):
    """
    Score survey answers into a ranked plan recommendation.

    Recognized keys: `naturalDisasterRisk`, `economicStability`,
    `livingSituation`, `storageSpace`, `incomeStability`, `savingsLevel`,
    `primaryConcern`. Other keys are ignored.
    """
    rec = engine.recommend(answers)
    logger.info(f"Recommended plan: {rec.primary_recommendation.value} (secondary: {rec.secondary_recommendation.value})")
    return _serialize_recommendation(rec)


@router.post("/generate", summary="Generate a customized plan using AI")
def generate_plan(request: PlanGenerationRequest):
    if not request.location or not request.type or not request.size:
        raise HTTPException(
            status_code=400,
            detail="Missing required fields: location, type, and size are required",
        )

    prompt = build_plan_prompt(request.location, request.type, request.size, request.specificNeeds)
    try:
        text = generator.generate(prompt, system_prompt=build_system_prompt())
    except TextGenerationUnavailable as e:
        raise HTTPException(status_code=503, detail=str(e))
    except TextGenerationError:
        raise HTTPException(status_code=502, detail="Error generating emergency plan")

    return {"message": "Emergency plan generated successfully", "plan": text}


def _serialize_steps(steps) -> List[Dict[str, Any]]:
    """Convert PlanSteps to JSON-serializable dicts, dropping unset attributes."""
    return [s.to_json() for s in steps]


def _serialize_recommendation(rec: PlanRecommendation) -> Dict[str, Any]:
    return {
        "primaryRecommendation": rec.primary_recommendation.value,
        "secondaryRecommendation": rec.secondary_recommendation.value,
        "reasoning": rec.reasoning,
    }
