"""Series provider protocol — what the HTTP surface and CLI depend on."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from quote_chart.core.models import DateRange, Series


@runtime_checkable
class SeriesProvider(Protocol):
    """Fetches the daily series for one symbol over one date range.

    Implementations hold no mutable state shared between calls, so one
    instance may serve concurrent requests for distinct symbols.
    """

    def fetch_series(self, symbol: str, date_range: DateRange) -> Series:
        """Return the assembled series.

        Raises
        ------
        InputError
            ``symbol`` is empty or blank; no request is made.
        FetchError
            Transport, provider-status, or decode failure.
        """
        ...
