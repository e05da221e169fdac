"""
Lesson Generator - thin wrapper around the Anthropic Messages API.

One blocking request per prompt: a single user message, fixed model and
output budget, no streaming and no retry (the SDK client is built with
max_retries=0). Only a text first content block is accepted.
"""

from __future__ import annotations

from typing import Any

import anthropic
import httpx
from loguru import logger

from src.lessons.errors import GenerationError

DEFAULT_MODEL = "claude-3-5-sonnet-20241022"
DEFAULT_MAX_TOKENS = 2048


class LessonGenerator:
    """
    Sends lesson prompts to Claude and returns the raw reply text.

    The SDK client is created on first use, so a missing API key surfaces as
    a GenerationError for the template being generated rather than at startup.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model_name: str = DEFAULT_MODEL,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        client: Any | None = None,
        http_client: httpx.Client | None = None,
    ):
        """
        Initialize the generator.

        Args:
            api_key: Anthropic API key
            model_name: Model identifier sent with every request
            max_tokens: Maximum output tokens per request
            client: Pre-built client exposing ``messages.create`` (tests)
            http_client: Transport for the SDK client it builds (proxies, tests)
        """
        self.api_key = api_key
        self.model_name = model_name
        self.max_tokens = max_tokens
        self._client = client
        self._http_client = http_client
        self.request_count = 0

    @property
    def client(self):
        """Lazy-load the Anthropic client."""
        if self._client is None:
            if not self.api_key:
                raise GenerationError("ANTHROPIC_API_KEY is not set")
            self._client = anthropic.Anthropic(
                api_key=self.api_key,
                max_retries=0,
                http_client=self._http_client,
            )
        return self._client

    def generate(self, prompt: str) -> str:
        """
        Send one prompt and return the text of the first content block.

        Raises:
            GenerationError: on a missing API key, API/network failure or a
                non-text response
        """
        self.request_count += 1
        try:
            response = self.client.messages.create(
                model=self.model_name,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.AnthropicError as e:
            logger.debug(f"Anthropic API error: {e}")
            raise GenerationError(f"Generation request failed: {e}") from e

        blocks = getattr(response, "content", None) or []
        if not blocks or getattr(blocks[0], "type", None) != "text":
            raise GenerationError("Unexpected response type")

        text = blocks[0].text
        logger.debug(f"Received {len(text)} characters from {self.model_name}")
        return text
