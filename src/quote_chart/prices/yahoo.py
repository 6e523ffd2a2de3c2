"""Yahoo Finance CSV provider — direct HTTP implementation.

Uses the ``/v7/finance/download/`` endpoint via httpx. One synchronous
GET per call, no retries, no redirect or timeout overrides unless
``ProviderConfig.request_timeout`` is set. A provider that never answers
blocks the caller until the transport gives up.

Redirects are not followed (httpx default): a 3xx from the provider
surfaces as ``ProviderError`` carrying that status, where a client that
follows redirects would have fetched the new location.
"""

from __future__ import annotations

import logging

import httpx

from quote_chart.core.config import ProviderConfig
from quote_chart.core.exceptions import InputError, ProviderError, TransportError
from quote_chart.core.models import DateRange, Series
from quote_chart.prices.assembler import assemble
from quote_chart.prices.decoder import decode_rows
from quote_chart.prices.request import build_request_url

logger = logging.getLogger(__name__)


def require_symbol(symbol: str | None) -> str:
    """Return the stripped symbol, or raise InputError if there is none."""
    if symbol is None or not symbol.strip():
        raise InputError("empty symbol", context={"field": "symbol"})
    return symbol.strip()


class YahooCSVProvider:
    """Fetches daily history from Yahoo Finance's CSV download endpoint.

    Each call opens and closes its own ``httpx.Client``; instances keep
    only immutable configuration and are safe to share between threads.

    Parameters
    ----------
    config : ProviderConfig | None
        Base URL, User-Agent and optional timeout. Defaults if None.
    """

    def __init__(self, config: ProviderConfig | None = None) -> None:
        self._config = config or ProviderConfig()

    def _client(self) -> httpx.Client:
        kwargs: dict = {"headers": {"User-Agent": self._config.user_agent}}
        if self._config.request_timeout is not None:
            kwargs["timeout"] = httpx.Timeout(self._config.request_timeout)
        return httpx.Client(**kwargs)

    def fetch_series(self, symbol: str, date_range: DateRange) -> Series:
        """Download, decode and assemble the series for ``symbol``.

        Raises
        ------
        InputError
            Empty or blank symbol; nothing is sent.
        TransportError
            The request failed or the body could not be read.
        ProviderError
            Any status other than 200.
        DecodeError
            The body is not well-formed CSV (see ``decode_rows``).
        """
        symbol = require_symbol(symbol)
        url = build_request_url(symbol, date_range, self._config.base_url)
        context = {"symbol": symbol, "url": url}
        logger.debug("GET %s", url)

        try:
            with self._client() as client, client.stream("GET", url) as resp:
                if resp.status_code != httpx.codes.OK:
                    raise ProviderError(
                        f"{resp.status_code} {resp.reason_phrase}",
                        status_code=resp.status_code,
                        status_text=resp.reason_phrase,
                        context=context,
                    )
                series = assemble(decode_rows(resp.iter_lines()))
        except httpx.RequestError as e:
            raise TransportError(f"request to provider failed: {e}", context=context) from e

        logger.debug("Decoded %d rows for %s", len(series), symbol)
        return series


def fetch_series(
    symbol: str,
    date_range: DateRange,
    config: ProviderConfig | None = None,
) -> Series:
    """Convenience function: fetch one series with a throwaway provider."""
    return YahooCSVProvider(config).fetch_series(symbol, date_range)
