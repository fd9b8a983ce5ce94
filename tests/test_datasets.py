"""Tests for static dataset parsing and validation."""

from __future__ import annotations

import pytest

from analysis.dto import Category, DrilldownEntry
from core.charting.validator import DatasetValidationError, validate_datasets
from core.datasets import DEFAULT_CATEGORIES, DEFAULT_DRILLDOWN, default_datasets, parse_datasets


@pytest.mark.unit
def test_default_datasets_are_valid_and_read_only() -> None:
    """The built-in fruit datasets validate cleanly and cannot be mutated."""

    datasets = default_datasets()
    result = validate_datasets(datasets.categories, datasets.drilldown)
    assert result.is_valid
    assert result.warnings == ()
    with pytest.raises(TypeError):
        datasets.drilldown["Bananas"] = ()  # type: ignore[index]


@pytest.mark.unit
def test_validation_collects_all_errors() -> None:
    """Duplicate names, bad values and unknown drilldown keys are reported together."""

    categories = (
        Category(name="Apples", value=15),
        Category(name="Apples", value=-1),
        Category(name="", value=float("nan")),
    )
    drilldown = {"Pears": (DrilldownEntry(name="Bosc", value="3"),)}  # type: ignore[arg-type]
    result = validate_datasets(categories, drilldown)

    assert result.is_valid is False
    assert any("Duplicate category name" in err for err in result.errors)
    assert any("categories[1].value" in err for err in result.errors)
    assert any("categories[2].name" in err for err in result.errors)
    assert any("'Pears' does not match" in err for err in result.errors)
    assert any("drilldown['Pears'][0].value" in err for err in result.errors)

    with pytest.raises(DatasetValidationError) as excinfo:
        result.raise_for_errors()
    assert excinfo.value.errors == result.errors


@pytest.mark.unit
def test_validation_rejects_empty_and_all_zero() -> None:
    """An overview needs at least one category with a positive value."""

    assert validate_datasets((), {}).is_valid is False
    zero = validate_datasets((Category(name="a", value=0),), {})
    assert any("zero" in err for err in zero.errors)


@pytest.mark.unit
def test_missing_drilldown_is_warning_only() -> None:
    """Categories without breakdown validate with a warning."""

    result = validate_datasets((Category(name="Apples", value=1),), {})
    assert result.is_valid
    assert result.warnings == ("Category 'Apples' has no drilldown entries.",)


@pytest.mark.unit
def test_parse_accepts_mappings_and_pairs() -> None:
    """Entries may be `{name, value}` mappings or `[name, value]` pairs."""

    datasets = parse_datasets(
        {
            "categories": [{"name": "Apples", "value": 15}, ["Kiwis", 10]],
            "drilldown": {"Apples": [["Gala", 2], {"name": "Lobo", "value": 5}]},
        }
    )
    assert datasets.categories == (Category("Apples", 15), Category("Kiwis", 10))
    assert datasets.drilldown["Apples"] == (DrilldownEntry("Gala", 2), DrilldownEntry("Lobo", 5))


@pytest.mark.unit
@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"categories": ["Apples"]},
        {"categories": [["Apples", "many"]]},
        {"categories": [["Apples", 1]], "drilldown": ["Apples"]},
        {"categories": [["Apples", 1]], "drilldown": {"Apples": "Gala"}},
    ],
)
def test_parse_rejects_malformed_payloads(payload: object) -> None:
    """Shape errors are fatal configuration errors."""

    with pytest.raises(DatasetValidationError):
        parse_datasets(payload)
