"""Pydantic data models — the system's type contracts."""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

# --- Type Aliases ---

Symbol = str

# --- Enumerations ---


class TraceKind(StrEnum):
    """Plot types understood by the chart front end."""

    SCATTER = "scatter"
    BAR = "bar"


# --- Quote models ---


def _utc_midnight(day: date) -> int:
    return int(datetime.combine(day, time.min, tzinfo=timezone.utc).timestamp())


class Record(BaseModel):
    """One trading day as decoded from a single CSV line."""

    model_config = ConfigDict(frozen=True)

    date: date
    open: float = Field(ge=0)
    high: float = Field(ge=0)
    low: float = Field(ge=0)
    close: float = Field(ge=0)
    volume: int = Field(ge=0)


class Series(BaseModel):
    """Index-aligned columns of (date, closing price, volume).

    Position ``i`` in every column describes the same trading day. An
    empty series means "no data in range" and is not an error.
    """

    model_config = ConfigDict(frozen=True)

    dates: tuple[date, ...] = ()
    prices: tuple[float, ...] = ()
    volumes: tuple[int, ...] = ()

    @model_validator(mode="after")
    def columns_aligned(self) -> Series:
        lengths = {len(self.dates), len(self.prices), len(self.volumes)}
        if len(lengths) != 1:
            raise ValueError(
                f"columns must have equal length, got dates={len(self.dates)} "
                f"prices={len(self.prices)} volumes={len(self.volumes)}"
            )
        return self

    def __len__(self) -> int:
        return len(self.dates)

    @property
    def is_empty(self) -> bool:
        return not self.dates

    @classmethod
    def empty(cls) -> Series:
        return cls()


class DateRange(BaseModel):
    """Request window, sent to the provider as two UTC-midnight instants.

    ``start > end`` is not rejected; the provider decides what such a
    window means (usually no rows).
    """

    model_config = ConfigDict(frozen=True)

    start: date
    end: date

    @property
    def period1(self) -> int:
        """Unix seconds of ``start`` at 00:00 UTC."""
        return _utc_midnight(self.start)

    @property
    def period2(self) -> int:
        """Unix seconds of ``end`` at 00:00 UTC."""
        return _utc_midnight(self.end)


# --- Chart models ---


class Trace(BaseModel):
    """One plotted trace: ordered dates against ordered values."""

    model_config = ConfigDict(frozen=True)

    x: list[date]
    y: list[float]
    name: str
    type: TraceKind
    yaxis: str | None = None


class Grid(BaseModel):
    model_config = ConfigDict(frozen=True)

    rows: int = 2
    columns: int = 1


class Layout(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    grid: Grid = Grid()


class ChartSpec(BaseModel):
    """Two traces (price, volume) sharing a date axis, plus layout hints."""

    model_config = ConfigDict(frozen=True)

    data: tuple[Trace, Trace]
    layout: Layout
