"""Request / response schemas for the analysis endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from review_analyzer.domain.entities.analysis_result import AnalysisResult


class AnalyzeRequest(BaseModel):
    # Left untyped so a missing or non-string review reaches the use case
    # and is rejected with the same error as a blank one.
    review: Any = None


class AnalyzeResponse(BaseModel):
    sentiment: str
    emotions: list[str]
    mainIssue: str
    customerWants: str

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalyzeResponse":
        return cls(**result.to_dict())


class ErrorResponse(BaseModel):
    error: str
