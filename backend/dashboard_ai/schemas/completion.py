"""Pydantic schemas for the AI completion endpoints."""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator


class ChatMessage(BaseModel):
    """A single turn of a chat conversation."""

    role: Literal["user", "assistant"]
    content: str


class CompletionRequest(BaseModel):
    """Schema for asking the assistant a question."""

    prompt: str | None = None  # Blank or missing is answered with 400
    history: list[ChatMessage] = Field(default_factory=list)  # Oldest first

    @field_validator("history", mode="before")
    @classmethod
    def _ignore_non_list_history(cls, value: Any) -> Any:
        return value if isinstance(value, list) else []


class CompletionResponse(BaseModel):
    """Schema for the assistant's answer."""

    result: str


class CostSummaryResponse(BaseModel):
    """Aggregated token usage and spend."""

    total_requests: int
    total_input_tokens: int
    total_output_tokens: int
    total_cost: float
    today_requests: int
    today_cost: float
