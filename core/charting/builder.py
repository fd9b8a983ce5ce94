"""Builders for the overview pie and drilldown column chart options.

Both builders are pure: the same inputs always produce structurally equal
option dicts. Interaction handlers are created once by the selection pipeline
(see `make_select_handler` / `make_legend_handler`) and passed in, so the
builders never capture hidden state of their own.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from analysis.colors import generate_ramp
from analysis.drilldown import SelectedSlice, assemble
from analysis.dto import Category, DrilldownDataset, VisibleSlice

from .. import settings
from .scheduler import Scheduler
from .schema import (
    DRILLDOWN_LABEL_FORMAT,
    OVERVIEW_INNER_SIZE,
    OVERVIEW_SERIES_ID,
    OVERVIEW_SERIES_NAME,
    OVERVIEW_TITLE,
    ColumnSeries,
    DrilldownOptions,
    OverviewOptions,
    PointEvent,
    PointEvents,
    PointHandler,
    SeriesPoint,
)

logger = logging.getLogger(__name__)


class SelectionSink(Protocol):
    """Receiver of the state changes triggered by chart interactions."""

    def select(self, point: PointEvent) -> None: ...

    def recalculate_angle(self, point: PointEvent) -> None: ...


def build_overview_config(
    start_angle: float,
    *,
    categories: Sequence[Category],
    events: PointEvents,
) -> OverviewOptions:
    """Build the overview donut options.

    Args:
        start_angle: Rotation (degrees) at which the first slice starts.
        categories: Static overview dataset in series-definition order.
        events: Interaction hooks registered on every point.

    Returns:
        OverviewOptions ready for the rendering engine.
    """

    return {
        "chart": {"type": "pie"},
        "title": {"text": OVERVIEW_TITLE},
        "plotOptions": {
            "series": {
                "allowPointSelect": True,
                "point": {"events": events},
            }
        },
        "series": [
            {
                "type": "pie",
                "id": OVERVIEW_SERIES_ID,
                "name": OVERVIEW_SERIES_NAME,
                "data": [[category.name, category.value] for category in categories],
                "startAngle": start_angle,
                "innerSize": OVERVIEW_INNER_SIZE,
                "dataLabels": {"enabled": False},
                "showInLegend": True,
            }
        ],
        "legend": {"enabled": True, "align": "left", "layout": "vertical"},
    }


def build_drilldown_config(
    selected: SelectedSlice | None,
    *,
    dataset: DrilldownDataset,
) -> DrilldownOptions:
    """Build the drilldown column options for the current selection.

    Args:
        selected: The selected overview slice, or None.
        dataset: Static drilldown dataset.

    Returns:
        DrilldownOptions with one stacked-percent column series per sub-entry.

    Raises:
        ColorParseError: When the selected slice color cannot be parsed.
    """

    series: list[ColumnSeries] = [
        {
            "type": "column",
            "id": entry.name,
            "name": entry.name,
            "color": entry.color,
            "data": [entry.value],
            "dataLabels": {"enabled": True, "format": DRILLDOWN_LABEL_FORMAT},
        }
        for entry in assemble(selected, dataset, ramp=_ramp)
    ]
    return {
        "chart": {"type": "column"},
        "title": {"text": ""},
        "subtitle": {"text": selected.name if selected is not None else ""},
        "xAxis": {"visible": False},
        "yAxis": {"visible": False},
        "plotOptions": {"series": {"stacking": "percent"}},
        "series": series,
        "tooltip": {"enabled": False},
        "legend": {"enabled": False},
    }


def make_select_handler(sink: SelectionSink) -> PointHandler:
    """Return the point `select` handler bound to `sink`."""

    def on_select(point: PointEvent) -> None:
        sink.select(point)

    return on_select


def make_legend_handler(sink: SelectionSink, scheduler: Scheduler) -> PointHandler:
    """Return the `legendItemClick` handler bound to `sink`.

    The engine fires the legend event before it applies the visibility toggle
    and redistributes percentages, so the angle is recomputed in a deferred
    task. That task looks up the selected point again when it runs; a stale or
    repeated task simply reflects the live selection.
    """

    def on_legend_item_click(point: PointEvent) -> None:
        if find_selected_point(point.series.points) is None:
            return

        def recompute() -> None:
            current = find_selected_point(point.series.points)
            if current is None:
                logger.debug("Deferred angle recompute skipped: no point selected")
                return
            sink.recalculate_angle(current)

        logger.debug("Legend click on %r; scheduling angle recompute", point.name)
        scheduler.schedule(recompute)

    return on_legend_item_click


def find_selected_point(points: Sequence[PointEvent]) -> PointEvent | None:
    """Return the first point flagged as selected, if any."""

    return next((p for p in points if p.selected), None)


def slice_from_point(point: SeriesPoint) -> VisibleSlice:
    """Snapshot an engine point into an immutable VisibleSlice."""

    return VisibleSlice(
        name=point.name,
        color=point.color,
        percentage=point.percentage,
        index=point.index,
        visible=point.visible,
    )


def _ramp(base_color: str, stop_count: int) -> list[str]:
    """Generate a drilldown ramp using the configured lightness settings."""

    return generate_ramp(
        base_color,
        stop_count,
        lightness_delta=settings.RAMP_LIGHTNESS_DELTA,
        min_stops=settings.RAMP_MIN_STOPS,
    )
