"""Error taxonomy for review analysis.

Every error carries a caller-safe ``message``; the HTTP layer maps each
category to a status code and never exposes anything else.
"""


class AnalysisError(Exception):
    message = "Failed to analyze review"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidInputError(AnalysisError):
    """Review missing, not a string, or empty. Raised before any LLM call."""

    message = "Review text is required"


class ConfigurationError(AnalysisError):
    """Credential for the LLM provider is absent. Raised before any LLM call."""

    message = "OpenAI API key is not configured"


class UpstreamFailureError(AnalysisError):
    """The LLM provider could not be reached or rejected the request."""

    message = "Failed to analyze review"
