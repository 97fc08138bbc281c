"""Pydantic schemas for request/response validation."""

from dashboard_ai.schemas.completion import (
    ChatMessage,
    CompletionRequest,
    CompletionResponse,
    CostSummaryResponse,
)

__all__ = ["ChatMessage", "CompletionRequest", "CompletionResponse", "CostSummaryResponse"]
