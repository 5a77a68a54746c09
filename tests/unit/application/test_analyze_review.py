"""Tests for AnalyzeReviewUseCase with an in-memory LLM fake."""

from __future__ import annotations

import pytest

from review_analyzer.application.ports.llm_port import TextGenerationPort
from review_analyzer.application.use_cases.analyze_review import AnalyzeReviewUseCase
from review_analyzer.domain.exceptions import (
    ConfigurationError,
    InvalidInputError,
    UpstreamFailureError,
)
from review_analyzer.domain.value_objects.enums import MessageRole

# ─── In-memory fakes ────────────────────────────────────────────────


class FakeLLM(TextGenerationPort):
    """Records every call and returns a canned reply (or raises)."""

    def __init__(self, reply: str = "", error: Exception | None = None):
        self._reply = reply
        self._error = error
        self.calls: list[dict] = []

    async def generate(self, model, messages, temperature):
        self.calls.append({"model": model, "messages": messages, "temperature": temperature})
        if self._error is not None:
            raise self._error
        return self._reply


# ─── Input validation ───────────────────────────────────────────────


@pytest.mark.asyncio
@pytest.mark.parametrize("review", [None, "", 42, ["text"], {"review": "x"}])
async def test_invalid_input_makes_no_call(review):
    llm = FakeLLM(reply="Sentiment: Positive")
    use_case = AnalyzeReviewUseCase(llm=llm, model="test-model")
    with pytest.raises(InvalidInputError):
        await use_case.execute(review)
    assert llm.calls == []


@pytest.mark.asyncio
async def test_whitespace_only_review_is_forwarded_once():
    llm = FakeLLM(reply="I cannot answer that.")
    use_case = AnalyzeReviewUseCase(llm=llm, model="m")

    result = await use_case.execute("   \n\t")

    assert len(llm.calls) == 1
    assert '"""   \n\t"""' in llm.calls[0]["messages"][1].content
    assert result.sentiment == ""


# ─── Happy path ─────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_end_to_end_scenario(sample_review, well_formed_reply):
    llm = FakeLLM(reply=well_formed_reply)
    use_case = AnalyzeReviewUseCase(llm=llm, model="test-model")

    result = await use_case.execute(sample_review)

    assert result.to_dict() == {
        "sentiment": "Negative",
        "emotions": ["frustration", "disappointment"],
        "mainIssue": "Product broke quickly and support was unresponsive",
        "customerWants": "A replacement or refund and faster support response",
    }


@pytest.mark.asyncio
async def test_single_call_with_two_messages(sample_review, well_formed_reply):
    llm = FakeLLM(reply=well_formed_reply)
    use_case = AnalyzeReviewUseCase(llm=llm, model="gpt-4")

    await use_case.execute(sample_review)

    assert len(llm.calls) == 1
    call = llm.calls[0]
    assert call["model"] == "gpt-4"
    assert call["temperature"] == 0.3
    roles = [m.role for m in call["messages"]]
    assert roles == [MessageRole.SYSTEM, MessageRole.USER]
    assert sample_review in call["messages"][1].content


@pytest.mark.asyncio
async def test_custom_temperature_is_forwarded(sample_review):
    llm = FakeLLM(reply="")
    use_case = AnalyzeReviewUseCase(llm=llm, model="m", temperature=0.0)
    await use_case.execute(sample_review)
    assert llm.calls[0]["temperature"] == 0.0


@pytest.mark.asyncio
async def test_unformatted_reply_is_not_an_error(sample_review):
    use_case = AnalyzeReviewUseCase(llm=FakeLLM(reply="I cannot answer that."), model="m")
    result = await use_case.execute(sample_review)
    assert result.sentiment == ""
    assert result.emotions == []
    assert result.main_issue == ""
    assert result.customer_wants == ""


# ─── Failures from the port ─────────────────────────────────────────


@pytest.mark.asyncio
async def test_upstream_failure_propagates(sample_review):
    llm = FakeLLM(error=UpstreamFailureError())
    use_case = AnalyzeReviewUseCase(llm=llm, model="m")
    with pytest.raises(UpstreamFailureError):
        await use_case.execute(sample_review)
    # No retry
    assert len(llm.calls) == 1


@pytest.mark.asyncio
async def test_configuration_error_propagates(sample_review):
    use_case = AnalyzeReviewUseCase(llm=FakeLLM(error=ConfigurationError()), model="m")
    with pytest.raises(ConfigurationError):
        await use_case.execute(sample_review)
