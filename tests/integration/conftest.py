"""Integration test fixtures — real provider and app, provider HTTP mocked with respx."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from quote_chart.core.config import APIConfig, ProviderConfig, QuoteChartConfig, RangeConfig

# NYSE full-day closures in the first half of 2021
_HOLIDAYS_H1_2021 = {
    date(2021, 1, 1),
    date(2021, 1, 18),
    date(2021, 2, 15),
    date(2021, 4, 2),
    date(2021, 5, 31),
}


def trading_days(start: date, end: date) -> list[date]:
    days = []
    day = start
    while day <= end:
        if day.weekday() < 5 and day not in _HOLIDAYS_H1_2021:
            days.append(day)
        day += timedelta(days=1)
    return days


@pytest.fixture
def h1_2021_csv() -> tuple[list[date], str]:
    """Provider-style CSV with one row per trading day of 2021 H1."""
    days = trading_days(date(2021, 1, 1), date(2021, 6, 30))
    lines = ["Date,Open,High,Low,Close,Adj Close,Volume"]
    for i, day in enumerate(days):
        close = 220.0 + i * 0.25
        lines.append(
            f"{day.isoformat()},{close - 1:.6f},{close + 1:.6f},{close - 2:.6f},"
            f"{close:.6f},{close:.6f},{20_000_000 + i * 1000}"
        )
    return days, "\n".join(lines) + "\n"


@pytest.fixture
def integration_config() -> QuoteChartConfig:
    return QuoteChartConfig(
        provider=ProviderConfig(base_url="https://quotes.test/v7/finance/download"),
        range=RangeConfig(start=date(2021, 1, 1), end=date(2021, 6, 30)),
        api=APIConfig(),
    )
