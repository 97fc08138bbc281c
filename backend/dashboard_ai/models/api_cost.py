"""API cost tracking model for monitoring LLM usage and expenses."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from dashboard_ai.db.base import Base


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, the way SQLite stores it."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class ApiCost(Base):
    """Token usage and cost of one completion request."""

    __tablename__ = "api_costs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)

    user_query: Mapped[str] = mapped_column(String(1000), nullable=False)  # First 1000 chars of prompt
    model: Mapped[str] = mapped_column(String(100), nullable=False)

    input_tokens: Mapped[int] = mapped_column(Integer, nullable=False)
    output_tokens: Mapped[int] = mapped_column(Integer, nullable=False)
    total_tokens: Mapped[int] = mapped_column(Integer, nullable=False)

    # USD
    input_cost: Mapped[float] = mapped_column(Float, nullable=False)
    output_cost: Mapped[float] = mapped_column(Float, nullable=False)
    total_cost: Mapped[float] = mapped_column(Float, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, nullable=False, index=True
    )

    def __repr__(self) -> str:
        return f"<ApiCost(id={self.id}, model={self.model}, cost=${self.total_cost:.6f}, tokens={self.total_tokens})>"
