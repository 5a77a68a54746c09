"""Review analysis endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from review_analyzer.application.use_cases.analyze_review import AnalyzeReviewUseCase
from review_analyzer.infrastructure.api.dependencies import get_analyze_review_uc
from review_analyzer.infrastructure.api.schemas import (
    AnalyzeRequest,
    AnalyzeResponse,
    ErrorResponse,
)

router = APIRouter(tags=["analyze"])


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def analyze_review(
    req: AnalyzeRequest,
    use_case: AnalyzeReviewUseCase = Depends(get_analyze_review_uc),
) -> AnalyzeResponse:
    """Analyze one customer review for sentiment, emotions and key insights.

    Errors are turned into ``{"error": ...}`` responses by the handlers
    registered in ``review_analyzer.infrastructure.api.errors``.
    """
    result = await use_case.execute(req.review)
    return AnalyzeResponse.from_result(result)
