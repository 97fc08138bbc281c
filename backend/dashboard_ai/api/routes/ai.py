"""AI endpoints: liveness probe and completions backed by the injected AI client."""

import logging

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from dashboard_ai.ai.client import AIClientError, CompletionClient
from dashboard_ai.ai.usage import record_usage, summarize_costs
from dashboard_ai.core.settings import Settings, get_settings
from dashboard_ai.db.base import get_db
from dashboard_ai.schemas.completion import (
    ChatMessage,
    CompletionRequest,
    CompletionResponse,
    CostSummaryResponse,
)

router = APIRouter()
logger = logging.getLogger(__name__)

PING_BODY = "ok"
PING_MEDIA_TYPE = "text/plain;charset=UTF-8"

SYSTEM_PROMPT = "You are a helpful assistant responding concisely to student questions."
EMPTY_COMPLETION_TEXT = "No response"


def get_ai_client(request: Request) -> CompletionClient | None:
    """Dependency that returns the AI client injected into the application, if any."""
    return getattr(request.app.state, "ai_client", None)


def require_bearer_token(authorization: str | None = Header(None)) -> str:
    """Dependency that demands an `Authorization: Bearer <token>` header.

    The token itself is checked by the identity provider in front of this service.
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return authorization.split(" ", 1)[1]


# No dependencies: the probe must stay up when the AI backend is down.
@router.get("/ping", summary="Liveness probe", response_class=PlainTextResponse)
def ping() -> PlainTextResponse:
    """Report that the process is up and routing requests."""
    return PlainTextResponse(content=PING_BODY, media_type=PING_MEDIA_TYPE)


@router.post(
    "/complete",
    response_model=CompletionResponse,
    dependencies=[Depends(require_bearer_token)],
)
def complete(
    request: CompletionRequest,
    client: CompletionClient | None = Depends(get_ai_client),
    settings: Settings = Depends(get_settings),
    db: Session = Depends(get_db),
) -> CompletionResponse:
    """Answer a student question, with the most recent chat history as context."""
    prompt = (request.prompt or "").strip()
    if not prompt:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing prompt")

    if client is None:
        logger.error("Completion requested but no AI client is configured")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="AI client not configured",
        )

    history = request.history[-settings.ai_history_limit:] if settings.ai_history_limit > 0 else []
    messages = [*history, ChatMessage(role="user", content=prompt)]

    logger.info(f"🤖 Completion request ({len(history)} history messages)")
    try:
        completion = client.complete(
            system=SYSTEM_PROMPT,
            messages=messages,
            max_tokens=settings.ai_max_tokens,
        )
    except AIClientError as e:
        logger.error(f"AI provider error: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"AI provider error: {e}",
        ) from e

    record_usage(db, prompt, completion, settings)

    return CompletionResponse(result=completion.text or EMPTY_COMPLETION_TEXT)


@router.get("/costs/summary", response_model=CostSummaryResponse)
def get_cost_summary(db: Session = Depends(get_db)) -> CostSummaryResponse:
    """Get token usage and spend across all completions."""
    return CostSummaryResponse(**summarize_costs(db))
