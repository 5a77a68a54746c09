"""FastAPI dependency injection — wires adapters into use cases.

``create_app`` stores its settings and the singleton LLM adapter on
``app.state``; the providers below read them back from the request.
"""

from __future__ import annotations

from fastapi import Depends, Request

from review_analyzer.adapters.llm.openai_adapter import OpenAIAdapter
from review_analyzer.application.use_cases.analyze_review import AnalyzeReviewUseCase
from review_analyzer.config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_llm_adapter(request: Request) -> OpenAIAdapter:
    return request.app.state.llm_adapter


def get_analyze_review_uc(
    app_settings: Settings = Depends(get_settings),
    llm: OpenAIAdapter = Depends(get_llm_adapter),
) -> AnalyzeReviewUseCase:
    return AnalyzeReviewUseCase(
        llm=llm,
        model=app_settings.openai_model,
        temperature=app_settings.openai_temperature,
    )
