"""
Assistant API Routes

Thin passthrough to the text generation model.
"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from utils.auth_deps import auth_user
from .generator import generator, TextGenerationUnavailable, TextGenerationError


router = APIRouter(prefix="/api/assistant", tags=["assistant"], dependencies=[Depends(auth_user)])


class PromptRequest(BaseModel):
    prompt: Optional[str] = Field(default=None, description="The prompt to send to the model")


@router.post("/generate", summary="Generate a response from a prompt")
def generate_response(request: PromptRequest):
    if not request.prompt:
        raise HTTPException(status_code=400, detail="Prompt is required")
    try:
        text = generator.generate(request.prompt)
    except TextGenerationUnavailable as e:
        raise HTTPException(status_code=503, detail=str(e))
    except TextGenerationError:
        raise HTTPException(status_code=502, detail="Failed to generate response")
    return {"response": text}
