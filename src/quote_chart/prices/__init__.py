"""Quote history pipeline.

Architecture
------------
One request flows through four pure-ish stages:

    build_request_url → HTTP GET → decode_rows → assemble → Series

- ``build_request_url``: symbol + DateRange into the provider URL.
- ``decode_rows``: CSV lines into ``Record`` objects, strictly.
- ``assemble``: Records into the columnar ``Series``.
- ``YahooCSVProvider``: runs the stages and folds every failure into
  ``FetchError``.

Consumers depend on the ``SeriesProvider`` protocol only.
"""

from quote_chart.prices.assembler import assemble, load_csv_series
from quote_chart.prices.decoder import REQUIRED_COLUMNS, decode_rows
from quote_chart.prices.provider import SeriesProvider
from quote_chart.prices.request import DEFAULT_BASE_URL, build_request_url
from quote_chart.prices.yahoo import YahooCSVProvider, fetch_series, require_symbol

__all__ = [
    # Request
    "DEFAULT_BASE_URL",
    "build_request_url",
    # Decode / assemble
    "REQUIRED_COLUMNS",
    "decode_rows",
    "assemble",
    "load_csv_series",
    # Providers
    "SeriesProvider",
    "YahooCSVProvider",
    "fetch_series",
    "require_symbol",
]
