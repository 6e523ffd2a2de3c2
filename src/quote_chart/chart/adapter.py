"""Series → ChartSpec projection for the front end."""

from __future__ import annotations

from quote_chart.core.models import ChartSpec, Grid, Layout, Series, Trace, TraceKind

PRICE_TRACE = "Price"
VOLUME_TRACE = "Volume"
VOLUME_AXIS = "y2"


def to_chart_spec(symbol: str, series: Series) -> ChartSpec:
    """Map a series to two traces on a shared date axis.

    The price trace is a line on the primary axis, the volume trace is a
    bar chart on ``y2``. Both get their own copy of the date column.
    """
    price = Trace(
        x=list(series.dates),
        y=list(series.prices),
        name=PRICE_TRACE,
        type=TraceKind.SCATTER,
    )
    volume = Trace(
        x=list(series.dates),
        y=[float(v) for v in series.volumes],
        name=VOLUME_TRACE,
        type=TraceKind.BAR,
        yaxis=VOLUME_AXIS,
    )
    return ChartSpec(
        data=(price, volume),
        layout=Layout(title=symbol, grid=Grid(rows=2, columns=1)),
    )
