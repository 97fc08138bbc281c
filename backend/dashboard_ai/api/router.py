"""Root API router for the application."""

from fastapi import APIRouter

from dashboard_ai.api.routes import ai, health

api_router = APIRouter()
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(ai.router, prefix="/ai", tags=["ai"])
