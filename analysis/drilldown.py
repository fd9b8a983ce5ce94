"""Drilldown series assembly for a selected overview slice."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from .colors import generate_ramp
from .dto import DrilldownDataset, SeriesSpec

logger = logging.getLogger(__name__)

RampFn = Callable[[str, int], list[str]]


class SelectedSlice(Protocol):
    """The parts of a selected slice the assembler reads."""

    name: str
    color: str


def assemble(
    selected: SelectedSlice | None,
    dataset: DrilldownDataset,
    *,
    ramp: RampFn = generate_ramp,
) -> list[SeriesSpec]:
    """Build the ordered, colored drilldown series for a selection.

    Args:
        selected: The selected slice, or None when nothing is selected.
        dataset: Static category-name to sub-entries mapping.
        ramp: Color ramp generator keyed to the slice color.

    Returns:
        One SeriesSpec per sub-entry, sorted ascending by value (ties keep
        dataset order) and colored light-to-dark by position. Empty when
        nothing is selected or the category has no breakdown.
    """

    if selected is None:
        return []

    entries = dataset.get(selected.name, ())
    if not entries:
        logger.debug("No drilldown entries for category %r", selected.name)

    ordered = sorted(entries, key=lambda entry: entry.value)
    colors = ramp(selected.color, len(ordered))
    return [SeriesSpec(name=entry.name, value=entry.value, color=color) for entry, color in zip(ordered, colors)]
