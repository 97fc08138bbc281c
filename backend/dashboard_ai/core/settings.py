"""Application settings and configuration utilities."""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _csv_env(name: str, default: str) -> list[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    """Immutable application settings derived from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Dashboard AI Backend")
    version: str = os.getenv("PROJECT_VERSION", "0.1.0")
    api_prefix: str = os.getenv("API_PREFIX", "/api")
    environment: str = os.getenv("ENVIRONMENT", "local")
    cors_origins: list[str] = field(default_factory=lambda: _csv_env("CORS_ORIGINS", "*"))

    # LLM Provider Configuration
    anthropic_api_key: str | None = os.getenv("ANTHROPIC_API_KEY") or None
    anthropic_model: str = os.getenv("ANTHROPIC_MODEL", "claude-sonnet-4-20250514")
    ai_max_tokens: int = int(os.getenv("AI_MAX_TOKENS", "1000"))
    ai_history_limit: int = int(os.getenv("AI_HISTORY_LIMIT", "8"))

    # Pricing (USD per million tokens)
    input_cost_per_million: float = float(os.getenv("AI_INPUT_COST_PER_MILLION", "3.0"))
    output_cost_per_million: float = float(os.getenv("AI_OUTPUT_COST_PER_MILLION", "15.0"))

    @property
    def database_path(self) -> str:
        """Return path to SQLite database file."""
        db_path = os.getenv("DATABASE_PATH")
        if db_path:
            return db_path
        # Default: dashboard_ai.db in backend directory
        backend_dir = Path(__file__).parent.parent.parent
        return str(backend_dir / "dashboard_ai.db")


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""
    return Settings()
