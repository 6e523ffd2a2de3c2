"""Shared pytest fixtures for quote-chart."""

from datetime import date

import pytest

from quote_chart.core.config import ProviderConfig, QuoteChartConfig
from quote_chart.core.models import DateRange, Record, Series

TEST_BASE_URL = "https://quotes.test/v7/finance/download"

CSV_HEADER = "Date,Open,High,Low,Close,Adj Close,Volume\n"

SAMPLE_CSV = (
    CSV_HEADER
    + "2021-01-04,222.529999,223.000000,214.809998,217.690002,214.085434,37130100\n"
    + "2021-01-05,217.259995,218.520004,215.699997,217.899994,214.291962,23823000\n"
    + "2021-01-06,212.169998,216.490005,211.940002,212.250000,208.735596,35930700\n"
)


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture
def sample_range() -> DateRange:
    return DateRange(start=date(2021, 1, 1), end=date(2021, 6, 30))


@pytest.fixture
def sample_record() -> Record:
    return Record(
        date=date(2021, 1, 4),
        open=222.53,
        high=223.0,
        low=214.81,
        close=217.69,
        volume=37130100,
    )


@pytest.fixture
def sample_series() -> Series:
    return Series(
        dates=(date(2021, 1, 4), date(2021, 1, 5), date(2021, 1, 6)),
        prices=(217.690002, 217.899994, 212.25),
        volumes=(37130100, 23823000, 35930700),
    )


@pytest.fixture
def provider_config() -> ProviderConfig:
    return ProviderConfig(base_url=TEST_BASE_URL, request_timeout=5)


@pytest.fixture
def test_config(provider_config: ProviderConfig) -> QuoteChartConfig:
    return QuoteChartConfig(provider=provider_config)
