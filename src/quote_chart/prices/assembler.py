"""Fold decoded Records into a columnar Series."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from pathlib import Path

from quote_chart.core.models import Record, Series
from quote_chart.prices.decoder import decode_rows


def assemble(records: Iterable[Record]) -> Series:
    """Append each record's date, close and volume to the matching column.

    Source order is kept; nothing is filtered, deduplicated or resampled.
    An exception raised while iterating ``records`` propagates and no
    series is returned.
    """
    dates: list[date] = []
    prices: list[float] = []
    volumes: list[int] = []
    for record in records:
        dates.append(record.date)
        prices.append(record.close)
        volumes.append(record.volume)

    return Series(dates=tuple(dates), prices=tuple(prices), volumes=tuple(volumes))


def load_csv_series(filepath: str | Path) -> Series:
    """Decode a CSV export saved to disk into a Series."""
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"CSV file not found: {filepath}")

    with open(path, "rb") as f:
        return assemble(decode_rows(f))
