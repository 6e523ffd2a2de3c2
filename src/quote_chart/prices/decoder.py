"""CSV row decoder — provider download format into Record objects.

The expected body is a header row naming the columns followed by one
comma-separated row per trading day::

    Date,Open,High,Low,Close,Volume
    2021-01-04,222.529999,223.000000,214.809998,217.690002,37130100

Columns are matched by name, so extra columns (``Adj Close``) and any
column order are accepted. Decoding is strict and all-or-nothing: the
first malformed header, row, date, or number raises ``DecodeError`` and
nothing decoded so far is usable.
"""

from __future__ import annotations

import csv
import re
from collections.abc import Iterable, Iterator
from datetime import date

from pydantic import ValidationError

from quote_chart.core.exceptions import DecodeError
from quote_chart.core.models import Record

DATE_COLUMN = "Date"
PRICE_COLUMNS = ("Open", "High", "Low", "Close")
VOLUME_COLUMN = "Volume"
REQUIRED_COLUMNS = (DATE_COLUMN, *PRICE_COLUMNS, VOLUME_COLUMN)

# ASCII digits only: float() and int() also accept other Unicode numerals.
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _text_lines(stream: Iterable[str | bytes]) -> Iterator[str]:
    for line in stream:
        yield line.decode("utf-8") if isinstance(line, bytes) else line


def _resolve_columns(header: list[str]) -> dict[str, int]:
    """Map required column names to their positions in the header."""
    names = [h.strip() for h in header]
    if names:
        names[0] = names[0].lstrip("\ufeff")

    positions: dict[str, int] = {}
    for i, name in enumerate(names):
        if name in positions:
            raise DecodeError(f"duplicate column in header: {name!r}", row=0, field=name)
        positions[name] = i

    missing = [c for c in REQUIRED_COLUMNS if c not in positions]
    if missing:
        raise DecodeError(
            f"header is missing columns {missing}: {names}",
            row=0,
            context={"header": names},
        )
    return {c: positions[c] for c in REQUIRED_COLUMNS}


def _parse_date(value: str, row: int) -> date:
    if not _DATE_RE.fullmatch(value):
        raise DecodeError(
            f"row {row}: {DATE_COLUMN} {value!r} is not YYYY-MM-DD",
            row=row,
            field=DATE_COLUMN,
        )
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise DecodeError(
            f"row {row}: {DATE_COLUMN} {value!r}: {e}", row=row, field=DATE_COLUMN
        ) from e


def _parse_float(value: str, column: str, row: int) -> float:
    if not _FLOAT_RE.fullmatch(value):
        raise DecodeError(f"row {row}: {column} {value!r} is not a number", row=row, field=column)
    return float(value)


def _parse_int(value: str, column: str, row: int) -> int:
    if not _INT_RE.fullmatch(value):
        raise DecodeError(f"row {row}: {column} {value!r} is not an integer", row=row, field=column)
    return int(value)


def _decode_record(fields: list[str], columns: dict[str, int], row: int) -> Record:
    values = {
        "date": _parse_date(fields[columns[DATE_COLUMN]], row),
        "volume": _parse_int(fields[columns[VOLUME_COLUMN]], VOLUME_COLUMN, row),
    }
    for column in PRICE_COLUMNS:
        values[column.lower()] = _parse_float(fields[columns[column]], column, row)

    try:
        return Record(**values)
    except ValidationError as e:
        err = e.errors()[0]
        field = str(err["loc"][0]).capitalize() if err["loc"] else None
        raise DecodeError(f"row {row}: {field} {err['msg']}", row=row, field=field) from e


def decode_rows(stream: Iterable[str | bytes]) -> Iterator[Record]:
    """Lazily decode a CSV body into Records, in source order.

    Parameters
    ----------
    stream : Iterable[str | bytes]
        Lines of the body: an HTTP line iterator, an open file, a list.
        ``bytes`` lines are decoded as UTF-8.

    Yields
    ------
    Record
        One per non-blank data row. The generator cannot be restarted.

    Raises
    ------
    DecodeError
        Missing or incomplete header, a row with the wrong number of
        fields, or a malformed date or numeric field.
    """
    reader = csv.reader(_text_lines(stream))
    header: list[str] | None = None
    row = 0
    try:
        header = next(reader, None)
        if header is None:
            raise DecodeError("empty body: missing header row", row=0)
        columns = _resolve_columns(header)

        for fields in reader:
            if not fields:
                continue
            row += 1
            if len(fields) != len(header):
                raise DecodeError(
                    f"row {row}: expected {len(header)} fields, got {len(fields)}",
                    row=row,
                )
            yield _decode_record(fields, columns, row)
    except (csv.Error, UnicodeDecodeError) as e:
        # the failing line is the header or the data row after the last good one
        failed_row = 0 if header is None else row + 1
        raise DecodeError(f"unreadable CSV: {e}", row=failed_row) from e
