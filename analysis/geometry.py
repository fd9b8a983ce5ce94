"""Pie geometry helpers.

The overview pie draws slices in series-definition order, starting at the
series start angle and advancing by each visible slice's share of the circle.
`compute_start_angle` inverts that layout: given the angle at which a slice's
midpoint should sit, it returns the start angle that puts it there.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

from .dto import Category

DEFAULT_ANCHOR_ANGLE = 90.0


class SliceGeometry(Protocol):
    """Minimal slice shape needed by the angle solver."""

    percentage: float
    index: int
    visible: bool


def percentage_to_degree(percentage: float) -> float:
    """Convert a 0-100 percentage into degrees of a full circle."""

    return percentage / 100 * 360


def compute_start_angle(
    selected: SliceGeometry,
    ordered_visible_slices: Iterable[SliceGeometry],
    anchor_angle: float = DEFAULT_ANCHOR_ANGLE,
) -> float:
    """Return the start angle that centers `selected` on `anchor_angle`.

    Args:
        selected: The slice that was just selected.
        ordered_visible_slices: All slices of the series, as reported by the
            rendering engine. Hidden slices are ignored; their share is
            expected to be redistributed in the reported percentages already.
        anchor_angle: Angle (degrees) where the selected slice's midpoint
            should end up.

    Returns:
        The start angle in degrees. The value is not normalized and may be
        negative or exceed 360.
    """

    preceding = sum(
        percentage_to_degree(s.percentage)
        for s in ordered_visible_slices
        if s.visible and s.index < selected.index
    )
    half_span = percentage_to_degree(selected.percentage) / 2
    return anchor_angle - half_span - preceding


def category_percentages(
    categories: Sequence[Category],
    *,
    hidden: Iterable[str] = (),
) -> list[float]:
    """Return each category's share of the visible total, in input order.

    The rendering engine normally supplies these values; this helper applies
    the same formula for in-process hosts and tests.

    Args:
        categories: Overview categories in series-definition order.
        hidden: Names of categories currently hidden via the legend.

    Returns:
        Percentages aligned to `categories`. Hidden categories get 0.0, and
        every entry is 0.0 when the visible total is zero.
    """

    hidden_names = set(hidden)
    total = sum(c.value for c in categories if c.name not in hidden_names)
    if total == 0:
        return [0.0 for _ in categories]
    return [0.0 if c.name in hidden_names else c.value / total * 100 for c in categories]
