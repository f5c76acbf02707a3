"""
Health status model
"""
from datetime import datetime, UTC
from pydantic import Field

from models.base import DashboardBaseModel


class HealthStatus(DashboardBaseModel):
    """Liveness signal; never touches the upstream API."""

    status: str = "ok"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
