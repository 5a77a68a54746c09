"""Health check endpoint."""

from fastapi import APIRouter, Depends

from review_analyzer.adapters.llm.openai_adapter import OpenAIAdapter
from review_analyzer.config import Settings
from review_analyzer.infrastructure.api.dependencies import get_llm_adapter, get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    app_settings: Settings = Depends(get_settings),
    llm: OpenAIAdapter = Depends(get_llm_adapter),
):
    """Report whether the LLM credential is configured. Makes no LLM call."""
    configured = llm.is_configured
    return {
        "status": "ok" if configured else "degraded",
        "model": app_settings.openai_model,
        "llm_configured": configured,
    }
