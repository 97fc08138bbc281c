"""Database models."""

from dashboard_ai.models.api_cost import ApiCost

__all__ = ["ApiCost"]
