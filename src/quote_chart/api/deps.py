"""Dependency injection for FastAPI routes."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from string import Template

from fastapi import Request

from quote_chart.core.config import APIConfig, QuoteChartConfig
from quote_chart.prices.provider import SeriesProvider

STATIC_DIR = Path(__file__).parent / "static"


@dataclass(frozen=True)
class StaticAssets:
    """Bundled front-end content, rendered once at startup and never mutated."""

    index_html: str
    static_dir: Path

    @classmethod
    def load(cls, api_config: APIConfig, static_dir: Path = STATIC_DIR) -> StaticAssets:
        template = Template((static_dir / "index.html").read_text(encoding="utf-8"))
        html = template.substitute(title="Stocks", plotly_url=api_config.plotly_url)
        return cls(index_html=html, static_dir=static_dir)


@dataclass(frozen=True)
class AppState:
    """Read-only application state, attached to app.state during lifespan."""

    config: QuoteChartConfig
    provider: SeriesProvider
    assets: StaticAssets


def get_app_state(request: Request) -> AppState:
    """Dependency: retrieve AppState from the request."""
    return request.app.state.app_state


def get_config(request: Request) -> QuoteChartConfig:
    """Dependency: retrieve config."""
    return request.app.state.app_state.config


def get_provider(request: Request) -> SeriesProvider:
    """Dependency: retrieve the series provider."""
    return request.app.state.app_state.provider


def get_assets(request: Request) -> StaticAssets:
    """Dependency: retrieve the rendered static assets."""
    return request.app.state.app_state.assets
