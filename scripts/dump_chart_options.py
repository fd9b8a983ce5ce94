#!/usr/bin/env python3
"""Print the overview and drilldown chart options as JSON.

Developer-facing helper for checking a dataset file before handing it to a
renderer. The YAML file is read here and the decoded payload is passed to
`core.datasets.parse_datasets`; the chart core itself never touches files.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

import yaml

from analysis.dto import VisibleSlice
from analysis.geometry import category_percentages, compute_start_angle
from core.charting.pipeline import SelectionPipeline
from core.charting.snapshot_codec import encode_chart_options
from core.datasets import ChartDatasets, default_datasets, parse_datasets


def load_datasets(path: str | Path) -> ChartDatasets:
    """Load and validate datasets from a YAML file.

    Raises:
        DatasetValidationError: When the file content is malformed or inconsistent.
    """

    payload = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    return parse_datasets(payload)


def build_report(datasets: ChartDatasets, *, select: str | None = None, color: str = "#7cb5ec") -> dict[str, Any]:
    """Return encoded options for both charts, optionally with `select` chosen."""

    pipeline = SelectionPipeline(datasets.categories, datasets.drilldown)
    if select is not None:
        names = [category.name for category in datasets.categories]
        if select not in names:
            raise SystemExit(f"Unknown category {select!r}; expected one of {names}.")
        percentages = category_percentages(datasets.categories)
        slices = [
            VisibleSlice(name=name, color=color, percentage=pct, index=idx, visible=True)
            for idx, (name, pct) in enumerate(zip(names, percentages))
        ]
        selected = slices[names.index(select)]
        pipeline.publish(compute_start_angle(selected, slices, pipeline.anchor_angle), selected)

    return {
        "overview": encode_chart_options(pipeline.overview_config.value),
        "drilldown": encode_chart_options(pipeline.drilldown_config.value),
    }


def main(argv: list[str] | None = None) -> int:
    """Load datasets, build both chart configs and print a JSON report."""

    parser = argparse.ArgumentParser(description="Dump pie/drilldown chart options as JSON.")
    parser.add_argument("--datasets", default=None, help="Path to a YAML dataset file (defaults to the fruit data).")
    parser.add_argument("--select", default=None, help="Category to show as selected.")
    parser.add_argument("--color", default="#7cb5ec", help="Slice color used for the selected category.")
    args = parser.parse_args(argv)

    datasets = load_datasets(args.datasets) if args.datasets else default_datasets()
    report = build_report(datasets, select=args.select, color=args.color)
    print(json.dumps(report, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
