"""Static datasets for the overview pie and its drilldown.

The default datasets describe fruit sales. Hosts may supply alternate
datasets as an already-decoded mapping (for example parsed from YAML or JSON
outside this package) through `parse_datasets`; both sources are validated
before use and are read-only afterwards.

Payload layout (shown as YAML)::

    categories:
      - {name: Apples, value: 15}
    drilldown:
      Apples:
        - {name: Cortland, value: 5}

Entries may also be written as `[name, value]` pairs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from analysis.dto import Category, DrilldownDataset, DrilldownEntry

from .charting.validator import DatasetValidationError, validate_datasets

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChartDatasets:
    """Validated, immutable pair of overview and drilldown datasets."""

    categories: tuple[Category, ...]
    drilldown: DrilldownDataset


def freeze_drilldown(raw: dict[str, tuple[DrilldownEntry, ...]]) -> DrilldownDataset:
    """Wrap a drilldown mapping in a read-only view."""

    return MappingProxyType({key: tuple(entries) for key, entries in raw.items()})


DEFAULT_CATEGORIES: tuple[Category, ...] = (
    Category(name="Apples", value=15),
    Category(name="Oranges", value=5),
    Category(name="Kiwis", value=10),
    Category(name="Strawberries", value=20),
)

DEFAULT_DRILLDOWN: DrilldownDataset = freeze_drilldown(
    {
        "Apples": (
            DrilldownEntry(name="Cortland", value=5),
            DrilldownEntry(name="Jonaprince", value=3),
            DrilldownEntry(name="Gala", value=2),
            DrilldownEntry(name="Lobo", value=5),
        ),
        "Oranges": (DrilldownEntry(name="Valencia", value=5),),
        "Kiwis": (
            DrilldownEntry(name="Normal", value=7),
            DrilldownEntry(name="Hardy", value=3),
        ),
        "Strawberries": (
            DrilldownEntry(name="Senga Sengana", value=10),
            DrilldownEntry(name="Elsanta", value=9),
            DrilldownEntry(name="Honeoye", value=1),
        ),
    }
)


def default_datasets() -> ChartDatasets:
    """Return the built-in fruit sales datasets."""

    return ChartDatasets(categories=DEFAULT_CATEGORIES, drilldown=DEFAULT_DRILLDOWN)


def parse_datasets(payload: Any) -> ChartDatasets:
    """Convert a decoded YAML/JSON payload into validated datasets.

    Raises:
        DatasetValidationError: When the payload is malformed or inconsistent.
    """

    if not isinstance(payload, dict):
        raise DatasetValidationError([f"Dataset payload must be a mapping, got {type(payload).__name__}."])

    errors: list[str] = []
    categories: list[Category] = []
    for idx, item in enumerate(payload.get("categories") or ()):
        pair = _parse_pair(item, where=f"categories[{idx}]", errors=errors)
        if pair is not None:
            categories.append(Category(name=pair[0], value=pair[1]))

    drilldown_raw = payload.get("drilldown") or {}
    drilldown: dict[str, tuple[DrilldownEntry, ...]] = {}
    if not isinstance(drilldown_raw, dict):
        errors.append("drilldown must be a mapping of category name to entries.")
        drilldown_raw = {}
    for key, items in drilldown_raw.items():
        if not isinstance(items, list):
            errors.append(f"drilldown[{key!r}] must be a list of entries.")
            continue
        entries: list[DrilldownEntry] = []
        for idx, item in enumerate(items):
            pair = _parse_pair(item, where=f"drilldown[{key!r}][{idx}]", errors=errors)
            if pair is not None:
                entries.append(DrilldownEntry(name=pair[0], value=pair[1]))
        drilldown[str(key)] = tuple(entries)

    if errors:
        raise DatasetValidationError(errors)

    datasets = ChartDatasets(categories=tuple(categories), drilldown=freeze_drilldown(drilldown))
    result = validate_datasets(datasets.categories, datasets.drilldown)
    for warning in result.warnings:
        logger.warning(warning)
    result.raise_for_errors()
    return datasets


def _parse_pair(item: object, *, where: str, errors: list[str]) -> tuple[str, float] | None:
    """Parse a `{name, value}` mapping or `[name, value]` pair."""

    if isinstance(item, dict):
        name, value = item.get("name"), item.get("value")
    elif isinstance(item, (list, tuple)) and len(item) == 2:
        name, value = item
    else:
        errors.append(f"{where} must be a {{name, value}} mapping or a [name, value] pair.")
        return None

    if not isinstance(name, str):
        errors.append(f"{where}.name must be a string.")
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        errors.append(f"{where}.value must be a number.")
        return None
    return name, value
