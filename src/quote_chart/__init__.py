"""quote-chart: daily quote history fetched from a CSV provider, served as chart data."""

__version__ = "0.1.0"
