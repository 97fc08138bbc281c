"""Usage ledger: cost accounting for completions."""

import logging
from datetime import datetime

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dashboard_ai.ai.client import Completion
from dashboard_ai.core.settings import Settings
from dashboard_ai.models.api_cost import ApiCost, utcnow

logger = logging.getLogger(__name__)


def record_usage(db: Session, prompt: str, completion: Completion, settings: Settings) -> ApiCost | None:
    """Store token usage and cost for one completion.

    Returns the stored row, or None if the write failed.
    """
    input_cost = (completion.input_tokens / 1_000_000) * settings.input_cost_per_million
    output_cost = (completion.output_tokens / 1_000_000) * settings.output_cost_per_million

    cost = ApiCost(
        user_query=prompt[:1000],
        model=completion.model,
        input_tokens=completion.input_tokens,
        output_tokens=completion.output_tokens,
        total_tokens=completion.total_tokens,
        input_cost=input_cost,
        output_cost=output_cost,
        total_cost=input_cost + output_cost,
    )
    try:
        db.add(cost)
        db.commit()
        db.refresh(cost)
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning(f"Could not record API cost: {e}")
        return None

    logger.info(
        f"💰 {completion.model}: {completion.input_tokens} in / {completion.output_tokens} out, "
        f"${cost.total_cost:.6f}"
    )
    return cost


def summarize_costs(db: Session, now: datetime | None = None) -> dict:
    """Aggregate all recorded usage, plus the totals since midnight UTC."""
    now = now or utcnow()
    today_start = now.replace(hour=0, minute=0, second=0, microsecond=0)

    total_cost = db.query(func.sum(ApiCost.total_cost)).scalar() or 0.0
    total_input_tokens = db.query(func.sum(ApiCost.input_tokens)).scalar() or 0
    total_output_tokens = db.query(func.sum(ApiCost.output_tokens)).scalar() or 0
    total_requests = db.query(func.count(ApiCost.id)).scalar() or 0

    today_cost = (
        db.query(func.sum(ApiCost.total_cost))
        .filter(ApiCost.created_at >= today_start)
        .scalar() or 0.0
    )
    today_requests = (
        db.query(func.count(ApiCost.id))
        .filter(ApiCost.created_at >= today_start)
        .scalar() or 0
    )

    return {
        "total_requests": total_requests,
        "total_input_tokens": total_input_tokens,
        "total_output_tokens": total_output_tokens,
        "total_cost": round(total_cost, 6),
        "today_requests": today_requests,
        "today_cost": round(today_cost, 6),
    }
