"""API-specific response schemas (Pydantic v2).

The chart payload itself is ``quote_chart.core.models.ChartSpec``.
"""

from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    error: str
    detail: str | None = None


class HealthResponse(BaseModel):
    """Service liveness and configuration summary."""

    status: str
    version: str
    provider: str
