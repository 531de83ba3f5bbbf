"""Anthropic Claude API client wrapper."""

import logging
import time
from typing import Optional

from anthropic import Anthropic, APIConnectionError, APIError, RateLimitError

from ..config import config
from ..errors import GenerationError

logger = logging.getLogger(__name__)


class AnthropicClient:
    """Client wrapper for Anthropic Claude API with retry logic."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        client: Optional[Anthropic] = None,
    ) -> None:
        """Initialize the Anthropic client.

        Args:
            api_key: Anthropic API key. Defaults to ANTHROPIC_API_KEY env var.
            model: Model to use. Defaults to config.default_model.
            max_retries: Maximum number of attempts for transient failures.
            retry_delay: Base delay between retries in seconds (exponential backoff).
            client: Preconfigured SDK client, mainly for tests.
        """
        self._api_key = api_key or config.anthropic_api_key
        if client is None and not self._api_key:
            raise ValueError(
                "Anthropic API key not provided. Set ANTHROPIC_API_KEY env var."
            )

        self._client = client or Anthropic(api_key=self._api_key)
        self._model = model or config.default_model
        self._max_retries = max(1, max_retries)
        self._retry_delay = retry_delay

    @property
    def model(self) -> str:
        """Return the model being used."""
        return self._model

    def _backoff(self, attempt: int, reason: str) -> None:
        delay = self._retry_delay * (2**attempt)
        logger.warning(f"{reason}. Retrying in {delay:.1f}s...")
        time.sleep(delay)

    def create_message(
        self,
        prompt: str,
        max_tokens: int = 8192,
        system: Optional[str] = None,
        temperature: float = 0.7,
    ) -> str:
        """Send one prompt to Claude and return the text of the reply.

        Rate-limit and connection errors are retried with exponential
        backoff; other API errors fail immediately.

        Raises:
            GenerationError: If the request fails or retries run out.
        """
        kwargs = {
            "model": self._model,
            "max_tokens": max_tokens,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": temperature,
        }
        if system:
            kwargs["system"] = system

        last_error: Optional[Exception] = None
        for attempt in range(self._max_retries):
            logger.debug(
                f"Sending request to Claude (attempt {attempt + 1}/{self._max_retries})"
            )
            try:
                response = self._client.messages.create(**kwargs)
            except RateLimitError as e:
                last_error = e
                if attempt < self._max_retries - 1:
                    self._backoff(attempt, "Rate limited")
                continue
            except APIConnectionError as e:
                last_error = e
                if attempt < self._max_retries - 1:
                    self._backoff(attempt, f"Connection error: {e}")
                continue
            except APIError as e:
                logger.error(f"API error: {e}")
                raise GenerationError(f"Claude request failed: {e}") from e

            text = "".join(
                block.text for block in response.content if getattr(block, "text", None)
            )
            if not text:
                raise GenerationError("Empty response from Claude")
            return text

        raise GenerationError(
            f"Claude request failed after {self._max_retries} attempts: {last_error}"
        ) from last_error
