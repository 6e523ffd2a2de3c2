"""HTTP surface: chart page, static assets and the /data endpoint."""

from quote_chart.api.app import create_app

__all__ = ["create_app"]
