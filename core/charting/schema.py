"""Option schema for the overview pie and drilldown column charts.

The option dicts mirror the rendering engine's configuration format (camelCase
keys) so they can be handed over as-is. Interaction handlers are plain
callables stored under `plotOptions.series.point.events`.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Literal, Protocol, TypedDict

ChartType = Literal["pie", "column"]

OVERVIEW_TITLE = "Pie chart with column details"
OVERVIEW_SERIES_ID = "data"
OVERVIEW_SERIES_NAME = "sold"
OVERVIEW_INNER_SIZE = "80%"
DRILLDOWN_LABEL_FORMAT = "{series.name}: {y}"


class SeriesPoint(Protocol):
    """A point of the overview series as exposed by the rendering engine."""

    name: str
    color: str
    percentage: float
    index: int
    visible: bool
    selected: bool


class PointSeries(Protocol):
    """The series a point belongs to, with points in definition order."""

    @property
    def points(self) -> Sequence[PointEvent]: ...


class PointEvent(SeriesPoint, Protocol):
    """The acted-upon point passed explicitly to interaction handlers."""

    @property
    def series(self) -> PointSeries: ...


PointHandler = Callable[[PointEvent], None]


class PointEvents(TypedDict):
    """Interaction hooks registered with the rendering engine."""

    select: PointHandler
    legendItemClick: PointHandler


class PointOptions(TypedDict):
    """Per-point options."""

    events: PointEvents


class TextOptions(TypedDict):
    """Title/subtitle text block."""

    text: str


class ChartOptions(TypedDict):
    """Chart-level options."""

    type: ChartType


class EnabledOptions(TypedDict):
    """A block that is only switched on or off."""

    enabled: bool


class AxisOptions(TypedDict):
    """Axis visibility."""

    visible: bool


class LegendOptions(TypedDict, total=False):
    """Legend block."""

    enabled: bool
    align: str
    layout: str


class DataLabelOptions(TypedDict, total=False):
    """Data label block."""

    enabled: bool
    format: str


class OverviewSeriesOptions(TypedDict, total=False):
    """Plot options applied to every overview series."""

    allowPointSelect: bool
    point: PointOptions


class OverviewPlotOptions(TypedDict):
    """Overview plot options."""

    series: OverviewSeriesOptions


class PieSeries(TypedDict):
    """The single overview donut series."""

    type: Literal["pie"]
    id: str
    name: str
    data: list[list[str | float]]
    startAngle: float
    innerSize: str
    dataLabels: DataLabelOptions
    showInLegend: bool


class OverviewOptions(TypedDict):
    """Full overview chart options."""

    chart: ChartOptions
    title: TextOptions
    plotOptions: OverviewPlotOptions
    series: list[PieSeries]
    legend: LegendOptions


class StackingOptions(TypedDict):
    """Drilldown series plot options."""

    stacking: Literal["percent"]


class DrilldownPlotOptions(TypedDict):
    """Drilldown plot options."""

    series: StackingOptions


class ColumnSeries(TypedDict):
    """One drilldown column series (a single stacked segment)."""

    type: Literal["column"]
    id: str
    name: str
    color: str
    data: list[float]
    dataLabels: DataLabelOptions


class DrilldownOptions(TypedDict):
    """Full drilldown chart options."""

    chart: ChartOptions
    title: TextOptions
    subtitle: TextOptions
    xAxis: AxisOptions
    yAxis: AxisOptions
    plotOptions: DrilldownPlotOptions
    series: list[ColumnSeries]
    tooltip: EnabledOptions
    legend: EnabledOptions
