"""AI client port and its Anthropic-backed implementation."""

import logging
from dataclasses import dataclass
from typing import Protocol, Sequence

import anthropic

from dashboard_ai.core.settings import Settings
from dashboard_ai.schemas.completion import ChatMessage

logger = logging.getLogger(__name__)


class AIClientError(Exception):
    """Raised when the LLM provider fails to produce a completion."""


@dataclass(frozen=True)
class Completion:
    """Text produced by the provider plus its token usage."""

    text: str
    model: str
    input_tokens: int = 0
    output_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens


class CompletionClient(Protocol):
    """Anything that can turn a conversation into a completion."""

    def complete(
        self,
        *,
        system: str,
        messages: Sequence[ChatMessage],
        max_tokens: int,
    ) -> Completion:
        ...


class AnthropicCompletionClient:
    """CompletionClient backed by the Anthropic Messages API."""

    def __init__(self, client: anthropic.Anthropic, model: str):
        self.client = client
        self.model = model

    def complete(
        self,
        *,
        system: str,
        messages: Sequence[ChatMessage],
        max_tokens: int,
    ) -> Completion:
        try:
            response = self.client.messages.create(
                model=self.model,
                max_tokens=max_tokens,
                system=system,
                messages=[{"role": m.role, "content": m.content} for m in messages],
            )
        except anthropic.APIError as e:
            logger.error(f"Anthropic request failed: {e}")
            raise AIClientError(str(e)) from e

        text = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )

        input_tokens = 0
        output_tokens = 0
        if getattr(response, "usage", None):
            input_tokens = response.usage.input_tokens or 0
            output_tokens = response.usage.output_tokens or 0

        return Completion(
            text=text.strip(),
            model=getattr(response, "model", None) or self.model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )


def build_ai_client(settings: Settings) -> CompletionClient | None:
    """Build the configured AI client, or None when no API key is set.

    Creating the SDK client opens no connection; the first request does.
    """
    if not settings.anthropic_api_key:
        logger.warning("ANTHROPIC_API_KEY not set. /ai/complete will return 503.")
        return None

    return AnthropicCompletionClient(
        anthropic.Anthropic(api_key=settings.anthropic_api_key),
        model=settings.anthropic_model,
    )
