"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class MessageRole(str, Enum):
    SYSTEM = "system"
    USER = "user"


class SentimentLabel(str, Enum):
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


class ReplyLabel(str, Enum):
    """Line prefixes of the four-line reply, in matching priority order."""

    SENTIMENT = "Sentiment:"
    EMOTIONS = "Emotions:"
    MAIN_ISSUE = "Main Issue:"
    CUSTOMER_WANTS = "Customer Wants:"
