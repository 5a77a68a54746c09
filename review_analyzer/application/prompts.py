"""Prompt construction for review analysis."""

from __future__ import annotations

from review_analyzer.domain.value_objects.chat_message import ChatMessage
from review_analyzer.domain.value_objects.enums import (
    MessageRole,
    ReplyLabel,
    SentimentLabel,
)

SYSTEM_PROMPT = (
    "You are an expert at analyzing customer reviews for sentiment, emotions, "
    "and key insights. Always respond in the exact format requested."
)

_SENTIMENT_CHOICES = "/".join(label.value for label in SentimentLabel)

REPLY_FORMAT = "\n".join(
    [
        f"{ReplyLabel.SENTIMENT.value} [{_SENTIMENT_CHOICES}]",
        f"{ReplyLabel.EMOTIONS.value} [list of 1–3 emotions separated by commas]",
        f"{ReplyLabel.MAIN_ISSUE.value} [What is the core issue/problem mentioned]",
        f"{ReplyLabel.CUSTOMER_WANTS.value} [What is the user expecting or looking for?]",
    ]
)

USER_PROMPT_TEMPLATE = """\
You are a sentiment and emotion analyzer AI.

A user has written the following review:

\"\"\"{review}\"\"\"

Please analyze and respond in this structured format:

{reply_format}

Please be concise and accurate in your analysis."""


def build_user_prompt(review: str) -> str:
    """Embed the review verbatim in the four-line format request."""
    return USER_PROMPT_TEMPLATE.format(review=review, reply_format=REPLY_FORMAT)


def build_messages(review: str) -> list[ChatMessage]:
    return [
        ChatMessage(role=MessageRole.SYSTEM, content=SYSTEM_PROMPT),
        ChatMessage(role=MessageRole.USER, content=build_user_prompt(review)),
    ]
