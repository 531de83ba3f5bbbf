"""Base agent abstraction."""

import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional

from ..services.anthropic import AnthropicClient
from ..config import config

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


def extract_json(response: str) -> str:
    """Extract a JSON document from text that may wrap it in markdown or prose."""
    # Fenced code blocks first
    for fence in ("```json", "```"):
        if fence in response:
            start = response.find(fence) + len(fence)
            end = response.find("```", start)
            if end > start:
                return response[start:end].strip()

    # Otherwise the first balanced object or array
    for start_char, end_char in [("{", "}"), ("[", "]")]:
        start = response.find(start_char)
        if start == -1:
            continue
        depth = 0
        in_string = False
        escaped = False
        for i, char in enumerate(response[start:], start):
            if in_string:
                if escaped:
                    escaped = False
                elif char == "\\":
                    escaped = True
                elif char == '"':
                    in_string = False
            elif char == '"':
                in_string = True
            elif char == start_char:
                depth += 1
            elif char == end_char:
                depth -= 1
                if depth == 0:
                    return response[start:i + 1]

    return response.strip()


class BaseAgent(ABC, Generic[InputT, OutputT]):
    """Abstract base class for Claude-backed generation agents.

    Subclasses define their prompts and implement ``run``.
    """

    def __init__(
        self,
        client: Optional[AnthropicClient] = None,
        model: Optional[str] = None,
    ) -> None:
        """Initialize the agent.

        Args:
            client: AnthropicClient instance. Created if not provided.
            model: Model to use. Defaults to config.default_model.
        """
        self._model = model or (client.model if client else config.default_model)
        self._client = client or AnthropicClient(model=self._model)
        self._logger = logging.getLogger(f"{__name__}.{self.name}")

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the agent's name."""
        ...

    @property
    @abstractmethod
    def system_prompt(self) -> str:
        """Return the system prompt for this agent."""
        ...

    @property
    def model(self) -> str:
        """Return the model being used."""
        return self._model

    @abstractmethod
    def run(self, input_data: InputT) -> OutputT:
        """Execute the agent's main task."""
        ...

    def _create_message(
        self,
        prompt: str,
        max_tokens: int = 8192,
        temperature: float = 0.7,
    ) -> str:
        """Send a prompt with this agent's system prompt and return the reply."""
        self._logger.debug(f"Creating message with prompt length: {len(prompt)}")
        response = self._client.create_message(
            prompt=prompt,
            max_tokens=max_tokens,
            system=self.system_prompt,
            temperature=temperature,
        )
        self._logger.debug(f"Received response of length: {len(response)}")
        return response
