"""Pytest fixtures shared across chart core tests.

`FakePieSeries` stands in for the rendering engine: it keeps points in
series-definition order, recomputes percentages over visible points, fires
`select` when a point becomes selected, and fires `legendItemClick` before it
applies the visibility toggle, as the real engine does.
"""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from analysis.dto import Category
from core.charting.pipeline import SelectionPipeline
from core.charting.scheduler import TaskQueue
from core.charting.schema import PointEvents
from core.datasets import DEFAULT_CATEGORIES, DEFAULT_DRILLDOWN

PALETTE = ("#3366CC", "#DC3912", "#FF9900", "#109618", "#990099", "#0099C6")


class FakePoint:
    """A pie point whose percentage is derived from its series."""

    def __init__(self, *, series: FakePieSeries, name: str, value: float, index: int, color: str) -> None:
        self.series = series
        self.name = name
        self.value = value
        self.index = index
        self.color = color
        self.visible = True
        self.selected = False

    @property
    def percentage(self) -> float:
        if not self.visible:
            return 0.0
        total = sum(p.value for p in self.series.points if p.visible)
        return self.value / total * 100 if total else 0.0


class FakePieSeries:
    """In-memory double of the engine's overview series."""

    def __init__(self, categories: Sequence[Category], events: PointEvents) -> None:
        self.events = events
        self.points = [
            FakePoint(series=self, name=c.name, value=c.value, index=idx, color=PALETTE[idx % len(PALETTE)])
            for idx, c in enumerate(categories)
        ]

    def point(self, name: str) -> FakePoint:
        return next(p for p in self.points if p.name == name)

    def click_point(self, name: str) -> None:
        """Toggle selection of a point, firing `select` when it becomes selected."""

        point = self.point(name)
        if point.selected:
            point.selected = False
            return
        for other in self.points:
            other.selected = False
        point.selected = True
        self.events["select"](point)

    def click_legend(self, name: str) -> None:
        """Fire `legendItemClick`, then toggle the point's visibility."""

        point = self.point(name)
        self.events["legendItemClick"](point)
        point.visible = not point.visible


@pytest.fixture
def task_queue() -> TaskQueue:
    """Return an empty deferred task queue."""

    return TaskQueue()


@pytest.fixture
def pipeline(task_queue: TaskQueue) -> SelectionPipeline:
    """Return a pipeline over the default fruit datasets, anchored at 90 degrees."""

    return SelectionPipeline(DEFAULT_CATEGORIES, DEFAULT_DRILLDOWN, scheduler=task_queue, anchor_angle=90.0)


@pytest.fixture
def pie(pipeline: SelectionPipeline) -> FakePieSeries:
    """Return an engine double wired to the pipeline's interaction handlers."""

    return FakePieSeries(pipeline.categories, pipeline.events)


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    The suite is runnable by intent:
    - `unit`: pure, fast tests on in-memory inputs.
    - `integration`: tests driving the pipeline end to end, or touching files.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
