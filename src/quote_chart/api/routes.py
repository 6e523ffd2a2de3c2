"""FastAPI route definitions for the quote-chart API."""

from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

import quote_chart
from quote_chart.api.deps import StaticAssets, get_assets, get_config, get_provider
from quote_chart.api.schemas import HealthResponse
from quote_chart.chart.adapter import to_chart_spec
from quote_chart.core.config import QuoteChartConfig
from quote_chart.core.models import ChartSpec
from quote_chart.prices.provider import SeriesProvider
from quote_chart.prices.yahoo import require_symbol

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def index(assets: StaticAssets = Depends(get_assets)):
    """The chart page."""
    return HTMLResponse(assets.index_html)


@router.get("/health", response_model=HealthResponse)
def health_check(config: QuoteChartConfig = Depends(get_config)):
    return HealthResponse(
        status="ok",
        version=quote_chart.__version__,
        provider=config.provider.base_url,
    )


# Plain ``def``: FastAPI runs each call on its own worker thread, so a slow
# provider blocks only that request.
@router.get("/data", response_model=ChartSpec, response_model_exclude_none=True)
def chart_data(
    symbol: str | None = Query(None, description="Ticker symbol, e.g. MSFT"),
    start: date | None = Query(None, description="First day (defaults to config range)"),
    end: date | None = Query(None, description="Last day (defaults to config range)"),
    config: QuoteChartConfig = Depends(get_config),
    provider: SeriesProvider = Depends(get_provider),
):
    """Chart description (price + volume traces) for ``symbol``."""
    symbol = require_symbol(symbol)
    logger.info("data: %r", symbol)

    series = provider.fetch_series(symbol, config.range.to_date_range(start, end))
    return to_chart_spec(symbol, series)
