"""Analyze a single customer review from the command line.

Usage:
    python -m review_analyzer.tools.analyze_review "The item broke after one use."
    echo "Great service!" | python -m review_analyzer.tools.analyze_review
    python -m review_analyzer.tools.analyze_review --model gpt-4o-mini "..."
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from review_analyzer.adapters.llm.openai_adapter import OpenAIAdapter
from review_analyzer.application.use_cases.analyze_review import AnalyzeReviewUseCase
from review_analyzer.config import settings
from review_analyzer.domain.entities.analysis_result import AnalysisResult
from review_analyzer.domain.exceptions import AnalysisError

logger = logging.getLogger(__name__)


async def analyze(review: str, model: str, temperature: float) -> AnalysisResult:
    use_case = AnalyzeReviewUseCase(
        llm=OpenAIAdapter(), model=model, temperature=temperature
    )
    return await use_case.execute(review)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Analyze a customer review with an LLM")
    parser.add_argument(
        "review", nargs="?", default=None,
        help="Review text (read from stdin when omitted)",
    )
    parser.add_argument(
        "--model", type=str, default=settings.openai_model,
        help=f"Model identifier (default: {settings.openai_model})",
    )
    parser.add_argument(
        "--temperature", type=float, default=settings.openai_temperature,
        help=f"Sampling temperature (default: {settings.openai_temperature})",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s | %(message)s",
    )

    review = args.review if args.review is not None else sys.stdin.read()

    try:
        result = asyncio.run(analyze(review, args.model, args.temperature))
    except AnalysisError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
