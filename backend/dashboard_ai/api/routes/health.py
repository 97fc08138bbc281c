"""Health and diagnostics endpoints."""

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter()


class HealthResponse(BaseModel):
    """Response model for health probes."""

    status: str = "ok"
    ai_client_configured: bool = False


@router.get(
    "/",
    summary="Readiness probe",
    response_model=HealthResponse,
)
def readiness_probe(request: Request) -> HealthResponse:
    """Return a readiness response; reports the AI client without calling it."""
    return HealthResponse(
        ai_client_configured=getattr(request.app.state, "ai_client", None) is not None,
    )
