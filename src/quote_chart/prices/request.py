"""Provider request URL construction."""

from __future__ import annotations

from urllib.parse import quote, urlencode

from quote_chart.core.models import DateRange

DEFAULT_BASE_URL = "https://query1.finance.yahoo.com/v7/finance/download"

_INTERVAL = "1d"
_EVENTS = "history"


def build_request_url(
    symbol: str,
    date_range: DateRange,
    base_url: str = DEFAULT_BASE_URL,
) -> str:
    """Build the CSV download URL for ``symbol`` over ``date_range``.

    The symbol is escaped as a single path segment (``/`` included), so a
    malformed symbol still yields a well-formed URL the provider rejects.
    Pure construction, no I/O.
    """
    params = {
        "period1": str(date_range.period1),
        "period2": str(date_range.period2),
        "interval": _INTERVAL,
        "events": _EVENTS,
    }
    return f"{base_url.rstrip('/')}/{quote(symbol, safe='')}?{urlencode(params)}"
