"""OpenAI adapter — implements TextGenerationPort using the OpenAI API."""

from __future__ import annotations

import logging

import httpx
from openai import AsyncOpenAI, OpenAIError

from review_analyzer.application.ports.llm_port import TextGenerationPort
from review_analyzer.config import Settings, settings as default_settings
from review_analyzer.domain.exceptions import ConfigurationError, UpstreamFailureError
from review_analyzer.domain.value_objects.chat_message import ChatMessage

logger = logging.getLogger(__name__)


class OpenAIAdapter(TextGenerationPort):
    """OpenAI implementation of TextGenerationPort.

    The SDK client is created on first use so the app can start (and report
    itself as degraded) without a key. SDK retries are disabled: a failed
    call surfaces directly as UpstreamFailureError.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: AsyncOpenAI | None = None,
    ):
        self._settings = settings or default_settings
        self._client = client

    @property
    def is_configured(self) -> bool:
        return self._client is not None or self._settings.openai_configured

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self._settings.openai_configured:
                logger.error("OPENAI_API_KEY is not set (or placeholder)")
                raise ConfigurationError()
            self._client = AsyncOpenAI(
                api_key=self._settings.openai_api_key,
                timeout=self._settings.openai_timeout_seconds,
                max_retries=0,
            )
        return self._client

    async def generate(
        self, model: str, messages: list[ChatMessage], temperature: float
    ) -> str:
        """Send messages to OpenAI chat completions and return the reply text."""
        client = self._get_client()

        try:
            response = await client.chat.completions.create(
                model=model,
                messages=[m.as_dict() for m in messages],
                temperature=temperature,
            )
        except (OpenAIError, httpx.HTTPError) as e:
            logger.exception("OpenAI call failed for model %s", model)
            raise UpstreamFailureError() from e

        if not response.choices:
            logger.warning("OpenAI returned no choices for model %s", model)
            raise UpstreamFailureError()

        content = response.choices[0].message.content
        if content is None:
            logger.warning("OpenAI returned an empty message for model %s", model)
            raise UpstreamFailureError()
        return content
