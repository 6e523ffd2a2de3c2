"""Custom exception hierarchy for quote-chart."""

from typing import Any


class QuoteChartError(Exception):
    """Base exception for all quote-chart errors.

    All exceptions carry an optional `context` dict for structured error
    metadata that can be logged or serialized without parsing the message.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class ConfigError(QuoteChartError):
    """Invalid or missing configuration.

    Raised by load_config() during startup. Should be treated as fatal.

    Context keys:
        field: str — the config field that failed validation
        value: Any — the invalid value
    """


class InputError(QuoteChartError):
    """Caller supplied an unusable request (missing or blank symbol).

    Policy: reject before any network call. Maps to HTTP 400.

    Context keys:
        field: str — the offending parameter
    """


class FetchError(QuoteChartError):
    """Could not produce a series for a symbol.

    The single failure channel of the fetch pipeline. Never retried,
    never returned alongside a partial series. Maps to HTTP 500.

    Context keys:
        symbol: str — the requested symbol
        url: str — the provider URL that was requested
    """


class TransportError(FetchError):
    """The request could not be sent or the response body could not be read."""


class ProviderError(FetchError):
    """The provider answered with a non-200 status.

    Context keys:
        status_code: int
        status_text: str — the provider's reason phrase
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        status_text: str = "",
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            message,
            context={**(context or {}), "status_code": status_code, "status_text": status_text},
        )
        self.status_code = status_code
        self.status_text = status_text


class DecodeError(FetchError):
    """The CSV body is malformed. Decoding is all-or-nothing.

    Attributes:
        row: int — 1-based data row number, 0 for the header
        field: str | None — the column that failed, if any
    """

    def __init__(
        self,
        message: str,
        row: int,
        field: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context={**(context or {}), "row": row, "field": field})
        self.row = row
        self.field = field
