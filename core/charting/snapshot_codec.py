"""Snapshot encoding for chart option dicts.

Option dicts built for the rendering engine carry interaction handlers as
Python callables. Encoding replaces each handler with the name of the event it
is registered for, producing a payload that is safe for `json.dumps` and for
structural comparison in tests and snapshots.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

from .schema import DrilldownOptions, OverviewOptions


def encode_chart_options(options: OverviewOptions | DrilldownOptions) -> dict[str, Any]:
    """Encode chart options into a JSON-serializable dictionary.

    Args:
        options: Overview or drilldown options from the builders.

    Returns:
        A deep copy with handlers replaced by their event names.

    Raises:
        TypeError: When a value is neither JSON-compatible nor callable.
    """

    return _encode(options, key="")


def dumps_chart_options(options: OverviewOptions | DrilldownOptions) -> str:
    """Return the encoded options as a deterministic JSON string."""

    return json.dumps(encode_chart_options(options), sort_keys=True)


def _encode(value: object, *, key: str) -> Any:
    """Recursively encode a value found under `key`."""

    if isinstance(value, Mapping):
        return {str(k): _encode(v, key=str(k)) for k, v in value.items()}
    if isinstance(value, (str, bool, int, float)) or value is None:
        return value
    if isinstance(value, Sequence):
        return [_encode(item, key=key) for item in value]
    if callable(value):
        return key
    raise TypeError(f"Cannot encode chart option {key!r} of type {type(value).__name__}.")
