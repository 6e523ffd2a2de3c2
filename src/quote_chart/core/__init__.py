"""quote_chart.core — Foundation types, config, and exceptions."""

from quote_chart.core.config import (
    APIConfig,
    ProviderConfig,
    QuoteChartConfig,
    RangeConfig,
    load_config,
)
from quote_chart.core.exceptions import (
    ConfigError,
    DecodeError,
    FetchError,
    InputError,
    ProviderError,
    QuoteChartError,
    TransportError,
)
from quote_chart.core.models import (
    ChartSpec,
    DateRange,
    Grid,
    Layout,
    Record,
    Series,
    Symbol,
    Trace,
    TraceKind,
)

__all__ = [
    # Type aliases
    "Symbol",
    # Enums
    "TraceKind",
    # Quote models
    "Record",
    "Series",
    "DateRange",
    # Chart models
    "Trace",
    "Grid",
    "Layout",
    "ChartSpec",
    # Config
    "QuoteChartConfig",
    "ProviderConfig",
    "RangeConfig",
    "APIConfig",
    "load_config",
    # Exceptions
    "QuoteChartError",
    "ConfigError",
    "InputError",
    "FetchError",
    "TransportError",
    "ProviderError",
    "DecodeError",
]
