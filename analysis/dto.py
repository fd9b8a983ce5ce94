"""DTO types shared by the pie and drilldown derivations.

DTOs are plain data containers passed between the pure derivation functions
and the chart builders. They intentionally avoid any rendering-engine types.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Category:
    """A top-level slice of the overview chart.

    Attributes:
        name: Display name, also the drilldown lookup key.
        value: Raw (non-normalized) value of the slice.
    """

    name: str
    value: float


@dataclass(frozen=True, slots=True)
class VisibleSlice:
    """Runtime view of a Category as reported by the rendering engine.

    Attributes:
        name: Category name.
        color: Slice color assigned by the engine (hex string).
        percentage: Share of the visible total, 0-100.
        index: Position in series-definition order (unaffected by visibility).
        visible: Whether the slice is currently shown.
    """

    name: str
    color: str
    percentage: float
    index: int
    visible: bool = True


@dataclass(frozen=True, slots=True)
class DrilldownEntry:
    """A single sub-entry of a category breakdown."""

    name: str
    value: float


@dataclass(frozen=True, slots=True)
class SeriesSpec:
    """One colored drilldown series (a single stacked column segment).

    Attributes:
        name: Sub-entry name, used as the series label.
        value: Sub-entry value, the single data point of the series.
        color: Ramp color assigned by position.
    """

    name: str
    value: float
    color: str


DrilldownDataset = Mapping[str, tuple[DrilldownEntry, ...]]
