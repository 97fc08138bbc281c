"""FastAPI application entry point."""

import logging
import os
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dashboard_ai.ai.client import CompletionClient, build_ai_client
from dashboard_ai.api.router import api_router
from dashboard_ai.core.settings import Settings, get_settings
from dashboard_ai.db.init_db import init_db

# Configure root logging to show all application logs
logging.basicConfig(
    level=logging.INFO,
    format='%(levelname)s:     %(name)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

logging.getLogger("sqlalchemy.engine").setLevel(logging.ERROR)
logging.getLogger("sqlalchemy.pool").setLevel(logging.ERROR)
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


def create_application(
    ai_client: CompletionClient | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Instantiate and configure the FastAPI application.

    ``ai_client`` is owned by the caller; when omitted it is built from
    settings, and stays None if no provider key is configured. The given
    ``settings`` are also what the routes see through ``get_settings``.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize database on startup."""
        init_db()
        logger.info(f"{settings.project_name} started ({settings.environment})")
        yield

    application = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url=f"{settings.api_prefix}/openapi.json",
        lifespan=lifespan,
    )

    application.state.ai_client = ai_client if ai_client is not None else build_ai_client(settings)
    application.dependency_overrides[get_settings] = lambda: settings

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )

    application.include_router(api_router, prefix=settings.api_prefix)

    return application


app = create_application()


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    port = int(os.environ.get("PORT", 8080))
    logger.info(f"Dashboard AI backend starting host=0.0.0.0 port={port}")
    uvicorn.run(
        "dashboard_ai.main:app",
        host="0.0.0.0",
        port=port,
        reload=False,
    )


if __name__ == "__main__":
    run()
