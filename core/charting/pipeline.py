"""Selection pipeline linking the overview pie to its drilldown.

The pipeline owns two replay-latest cells, the start angle and the current
selection, and exposes one derived option stream per chart. Every derived
value is a fresh application of the builders to the latest state.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from analysis.dto import Category, DrilldownDataset, VisibleSlice
from analysis.geometry import compute_start_angle

from .. import settings
from ..datasets import freeze_drilldown
from .builder import (
    build_drilldown_config,
    build_overview_config,
    make_legend_handler,
    make_select_handler,
    slice_from_point,
)
from .scheduler import Scheduler, TaskQueue
from .schema import DrilldownOptions, OverviewOptions, PointEvent, PointEvents
from .state import ObservableState, ReadableState
from .validator import validate_datasets

logger = logging.getLogger(__name__)


class SelectionPipeline:
    """Holds selection/angle state and republishes both chart configurations.

    Args:
        categories: Static overview dataset in series-definition order.
        dataset: Static drilldown dataset.
        scheduler: Scheduler for deferred legend recomputation. Defaults to a
            TaskQueue the host flushes after each event.
        anchor_angle: Angle the selected slice's midpoint is kept at. Defaults
            to `settings.ANCHOR_ANGLE`.

    Raises:
        DatasetValidationError: When the datasets are inconsistent.
    """

    def __init__(
        self,
        categories: Sequence[Category],
        dataset: DrilldownDataset,
        *,
        scheduler: Scheduler | None = None,
        anchor_angle: float | None = None,
    ) -> None:
        validate_datasets(categories, dataset).raise_for_errors()

        self.categories = tuple(categories)
        self.dataset = freeze_drilldown(dict(dataset))
        self.scheduler: Scheduler = scheduler if scheduler is not None else TaskQueue()
        self.anchor_angle = settings.ANCHOR_ANGLE if anchor_angle is None else anchor_angle

        self.events: PointEvents = {
            "select": make_select_handler(self),
            "legendItemClick": make_legend_handler(self, self.scheduler),
        }

        self.angle: ObservableState[float] = ObservableState(0.0)
        self.selection: ObservableState[VisibleSlice | None] = ObservableState(None)

        self.overview_config: ReadableState[OverviewOptions] = self.angle.map(self._build_overview)
        self.drilldown_config: ReadableState[DrilldownOptions] = self.selection.map(self._build_drilldown)

    def select(self, point: PointEvent) -> None:
        """Handle a point selection: re-anchor the pie, then update the selection."""

        self.recalculate_angle(point)
        self.selection.set(slice_from_point(point))

    def recalculate_angle(self, point: PointEvent) -> None:
        """Recompute the start angle so `point` is centered on the anchor angle."""

        angle = compute_start_angle(point, point.series.points, self.anchor_angle)
        logger.debug("Start angle for %r: %.3f", point.name, angle)
        self.angle.set(angle)

    def publish(self, angle: float, selection: VisibleSlice | None) -> None:
        """Set both state cells directly (angle first)."""

        self.angle.set(angle)
        self.selection.set(selection)

    def _build_overview(self, start_angle: float) -> OverviewOptions:
        return build_overview_config(start_angle, categories=self.categories, events=self.events)

    def _build_drilldown(self, selected: VisibleSlice | None) -> DrilldownOptions:
        return build_drilldown_config(selected, dataset=self.dataset)
