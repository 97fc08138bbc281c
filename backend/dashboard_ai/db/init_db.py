"""Database initialization utilities."""

import logging

from dashboard_ai.db.base import Base, engine
from dashboard_ai.models import ApiCost  # noqa: F401 - ensures models are registered

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Create all database tables."""
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")


if __name__ == "__main__":
    init_db()
