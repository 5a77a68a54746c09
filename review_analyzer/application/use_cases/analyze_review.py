"""AnalyzeReviewUseCase — analyze a single customer review via LLM."""

from __future__ import annotations

import logging
from typing import Any

from review_analyzer.application.ports.llm_port import TextGenerationPort
from review_analyzer.application.prompts import build_messages
from review_analyzer.domain.entities.analysis_result import AnalysisResult
from review_analyzer.domain.exceptions import InvalidInputError
from review_analyzer.domain.policies.reply_parser import parse_reply

logger = logging.getLogger(__name__)

DEFAULT_TEMPERATURE = 0.3


class AnalyzeReviewUseCase:
    """Orchestrates prompt construction, one LLM call and reply parsing."""

    def __init__(
        self,
        llm: TextGenerationPort,
        model: str,
        temperature: float = DEFAULT_TEMPERATURE,
    ):
        self._llm = llm
        self._model = model
        self._temperature = temperature

    async def execute(self, review: Any) -> AnalysisResult:
        """Analyze a review and return the parsed breakdown.

        Args:
            review: customer review text; anything other than a non-empty
                string is rejected.

        Returns:
            AnalysisResult parsed from the model reply.

        Raises:
            InvalidInputError: review missing, not a string, or empty.
            ConfigurationError: provider credential missing (from the port).
            UpstreamFailureError: provider call failed (from the port).
        """
        if not isinstance(review, str) or not review:
            logger.warning("Rejected review input of type %s", type(review).__name__)
            raise InvalidInputError()

        logger.info("Analyzing review (%d chars) with model %s", len(review), self._model)
        raw_text = await self._llm.generate(
            model=self._model,
            messages=build_messages(review),
            temperature=self._temperature,
        )

        result = parse_reply(raw_text)
        if not result.sentiment:
            logger.debug("Model reply had no sentiment line: %r", raw_text[:200])
        return result
