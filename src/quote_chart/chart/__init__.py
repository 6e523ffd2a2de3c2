"""Presentation adapter: Series into chart descriptions."""

from quote_chart.chart.adapter import PRICE_TRACE, VOLUME_TRACE, to_chart_spec

__all__ = ["PRICE_TRACE", "VOLUME_TRACE", "to_chart_spec"]
