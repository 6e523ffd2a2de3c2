"""Click-based CLI for quote-chart.

Thin wrapper around library modules: fetch a series, print its chart
description, or run the HTTP server.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime

import click
from rich.console import Console
from rich.table import Table

console = Console(stderr=True)

_DATE = click.DateTime(formats=["%Y-%m-%d"])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_config(ctx: click.Context):
    """Load config lazily, caching on first call."""
    if "config" not in ctx.obj:
        from quote_chart.core import ConfigError, load_config

        try:
            ctx.obj["config"] = load_config(config_path=ctx.obj.get("config_path"))
        except ConfigError as e:
            console.print(f"[red]Configuration error:[/red] {e}")
            raise SystemExit(1)
    return ctx.obj["config"]


def _resolve_range(config, start: datetime | None, end: datetime | None):
    """Build a DateRange, falling back to the configured window."""
    return config.range.to_date_range(
        start.date() if start else None,
        end.date() if end else None,
    )


def _fetch(ctx: click.Context, symbol: str, start: datetime | None, end: datetime | None):
    """Run the fetch pipeline, turning failures into a non-zero exit."""
    from quote_chart.core import FetchError, InputError
    from quote_chart.prices import YahooCSVProvider

    config = _load_config(ctx)
    date_range = _resolve_range(config, start, end)
    try:
        return YahooCSVProvider(config.provider).fetch_series(symbol, date_range)
    except InputError as e:
        raise click.UsageError(str(e))
    except FetchError as e:
        logging.getLogger(__name__).debug("fetch failed: %s", e.context)
        console.print(f"[red]Could not fetch {symbol}:[/red] {e}")
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    envvar="QUOTE_CHART_CONFIG",
    default=None,
    help="Path to quote-chart.yml config file.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output.",
)
@click.version_option(package_name="quote-chart")
@click.pass_context
def cli(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """Quote Chart: daily price and volume history as chart data."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose

    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ---------------------------------------------------------------------------
# fetch
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("symbol")
@click.option("--start", "-s", type=_DATE, default=None, help="First day (YYYY-MM-DD).")
@click.option("--end", "-e", type=_DATE, default=None, help="Last day (YYYY-MM-DD).")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "csv"], case_sensitive=False),
    default="table",
    help="Output format.",
)
@click.pass_context
def fetch(
    ctx: click.Context,
    symbol: str,
    start: datetime | None,
    end: datetime | None,
    output_format: str,
) -> None:
    """Download and decode the daily series for SYMBOL."""
    series = _fetch(ctx, symbol, start, end)

    if output_format == "json":
        click.echo(json.dumps(series.model_dump(mode="json"), indent=2))
    elif output_format == "csv":
        _output_series_csv(series)
    else:
        _output_series_table(symbol, series)


def _output_series_table(symbol: str, series) -> None:
    """Render a series as a Rich table."""
    if series.is_empty:
        console.print(f"[yellow]No data for {symbol} in range.[/yellow]")
        return

    table = Table(title=f"{symbol} ({len(series)} days)")
    table.add_column("Date")
    table.add_column("Close", justify="right")
    table.add_column("Volume", justify="right")

    for day, price, volume in zip(series.dates, series.prices, series.volumes):
        table.add_row(str(day), f"{price:.2f}", f"{volume:,}")

    console.print(table)


def _output_series_csv(series) -> None:
    """Write a series as CSV to stdout."""
    import csv
    import io

    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(["date", "close", "volume"])
    for day, price, volume in zip(series.dates, series.prices, series.volumes):
        writer.writerow([day.isoformat(), price, volume])
    click.echo(buf.getvalue(), nl=False)


# ---------------------------------------------------------------------------
# chart
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("symbol")
@click.option("--start", "-s", type=_DATE, default=None, help="First day (YYYY-MM-DD).")
@click.option("--end", "-e", type=_DATE, default=None, help="Last day (YYYY-MM-DD).")
@click.pass_context
def chart(ctx: click.Context, symbol: str, start: datetime | None, end: datetime | None) -> None:
    """Print the chart description JSON served by /data for SYMBOL."""
    from quote_chart.chart import to_chart_spec

    series = _fetch(ctx, symbol, start, end)
    spec = to_chart_spec(symbol.strip(), series)
    click.echo(spec.model_dump_json(exclude_none=True, indent=2))


# ---------------------------------------------------------------------------
# serve
# ---------------------------------------------------------------------------


@cli.command()
@click.option("--host", type=str, default=None, help="Bind address (default from config).")
@click.option("--port", "-p", type=int, default=None, help="Port number (default from config).")
@click.option("--reload", is_flag=True, default=False, help="Auto-reload on code changes.")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None, reload: bool) -> None:
    """Start the chart server."""
    import uvicorn

    config = _load_config(ctx)
    host = host or config.api.host
    port = port or config.api.port

    # The factory reloads config itself; point it at the same file.
    if ctx.obj.get("config_path"):
        os.environ["QUOTE_CHART_CONFIG"] = ctx.obj["config_path"]

    console.print(f"Starting quote-chart on [bold]{host}:{port}[/bold]")

    uvicorn.run(
        "quote_chart.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
