"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from quote_chart.api.deps import STATIC_DIR, AppState, StaticAssets
from quote_chart.api.routes import router
from quote_chart.api.schemas import ErrorResponse
from quote_chart.core.config import QuoteChartConfig, load_config
from quote_chart.core.exceptions import FetchError, InputError, QuoteChartError
from quote_chart.prices.provider import SeriesProvider
from quote_chart.prices.yahoo import YahooCSVProvider

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the read-only application state before serving."""
    config = app.state._pending_config or load_config()
    provider = app.state._pending_provider or YahooCSVProvider(config.provider)

    app.state.app_state = AppState(
        config=config,
        provider=provider,
        assets=StaticAssets.load(config.api),
    )

    yield


def create_app(
    config: QuoteChartConfig | None = None,
    provider: SeriesProvider | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    import quote_chart

    app = FastAPI(
        title="Quote Chart API",
        description="Daily price and volume history as chart data",
        version=quote_chart.__version__,
        lifespan=lifespan,
    )

    # Stash config and provider so lifespan can retrieve them
    app.state._pending_config = config
    app.state._pending_provider = provider

    app.include_router(router)
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    # Client sees a terse message; the detail only goes to the log.
    @app.exception_handler(QuoteChartError)
    async def quote_chart_exception_handler(request: Request, exc: QuoteChartError):
        if isinstance(exc, InputError):
            return JSONResponse(
                status_code=400,
                content=ErrorResponse(error="InputError", detail=str(exc)).model_dump(),
            )

        logger.error("%s %s: %s %s", request.url.path, type(exc).__name__, exc, exc.context)
        error = "FetchError" if isinstance(exc, FetchError) else "InternalError"
        detail = "can't fetch data" if isinstance(exc, FetchError) else "internal error"
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=error, detail=detail).model_dump(),
        )

    return app
