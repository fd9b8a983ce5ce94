"""Tests for the YAML dataset dump script."""

from __future__ import annotations

import importlib.util
import json
from pathlib import Path
from types import ModuleType

import pytest

from core.charting.validator import DatasetValidationError
from core.datasets import DEFAULT_CATEGORIES, DEFAULT_DRILLDOWN

pytestmark = pytest.mark.integration

FRUIT_YAML = (
    "categories:\n"
    "  - {name: Apples, value: 15}\n"
    "  - {name: Oranges, value: 5}\n"
    "  - {name: Kiwis, value: 10}\n"
    "  - {name: Strawberries, value: 20}\n"
    "drilldown:\n"
    "  Apples: [[Cortland, 5], [Jonaprince, 3], [Gala, 2], [Lobo, 5]]\n"
    "  Oranges: [[Valencia, 5]]\n"
    "  Kiwis: [[Normal, 7], [Hardy, 3]]\n"
    "  Strawberries: [[Senga Sengana, 10], [Elsanta, 9], [Honeoye, 1]]\n"
)


def _load_script() -> ModuleType:
    path = Path(__file__).resolve().parents[1] / "scripts" / "dump_chart_options.py"
    spec = importlib.util.spec_from_file_location("dump_chart_options", path)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_load_datasets_from_yaml(tmp_path) -> None:  # type: ignore[no-untyped-def]
    """YAML files load into the same structures as the defaults."""

    path = tmp_path / "fruit.yml"
    path.write_text(FRUIT_YAML, encoding="utf-8")
    datasets = _load_script().load_datasets(path)
    assert datasets.categories == DEFAULT_CATEGORIES
    assert dict(datasets.drilldown) == dict(DEFAULT_DRILLDOWN)


def test_load_datasets_rejects_inconsistent_yaml(tmp_path) -> None:  # type: ignore[no-untyped-def]
    """Drilldown keys must name an overview category."""

    path = tmp_path / "broken.yml"
    path.write_text("categories: [[Apples, 1]]\ndrilldown:\n  Pears: [[Bosc, 1]]\n", encoding="utf-8")
    with pytest.raises(DatasetValidationError, match="Pears"):
        _load_script().load_datasets(path)


def test_main_prints_both_chart_configs_for_a_selection(tmp_path, capsys) -> None:  # type: ignore[no-untyped-def]
    """The report holds the rotated overview and the selected drilldown."""

    path = tmp_path / "fruit.yml"
    path.write_text(FRUIT_YAML, encoding="utf-8")
    code = _load_script().main(["--datasets", str(path), "--select", "Kiwis", "--color", "#3366cc"])

    assert code == 0
    report = json.loads(capsys.readouterr().out)
    # Apples and Oranges span 144 degrees; half of Kiwis is 36.
    assert report["overview"]["series"][0]["startAngle"] == pytest.approx(90 - 144 - 36)
    assert report["drilldown"]["subtitle"]["text"] == "Kiwis"
    assert [s["name"] for s in report["drilldown"]["series"]] == ["Normal", "Hardy"]
    assert [s["color"] for s in report["drilldown"]["series"]] == ["#85a3e0", "#1f3d7a"]


def test_main_without_selection_uses_default_datasets(capsys) -> None:  # type: ignore[no-untyped-def]
    """With no arguments the fruit datasets are dumped unselected."""

    assert _load_script().main([]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["overview"]["series"][0]["startAngle"] == 0.0
    assert report["overview"]["series"][0]["data"][0] == ["Apples", 15]
    assert report["drilldown"]["series"] == []
