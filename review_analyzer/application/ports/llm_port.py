"""Port interface for LLM text generation."""

from abc import ABC, abstractmethod

from review_analyzer.domain.value_objects.chat_message import ChatMessage


class TextGenerationPort(ABC):
    @abstractmethod
    async def generate(
        self, model: str, messages: list[ChatMessage], temperature: float
    ) -> str:
        """Generate a single completion for the given role-tagged messages.

        Raises:
            ConfigurationError: provider credential is missing.
            UpstreamFailureError: provider unreachable or returned an error.
        """
        ...
