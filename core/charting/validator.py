"""Validation for the static overview and drilldown datasets.

The datasets are configuration, not user input: any inconsistency means the
charts cannot be derived correctly, so validation is strict and callers fail
fast on the first invalid result.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from analysis.dto import Category, DrilldownDataset


class DatasetValidationError(ValueError):
    """Raised when the static datasets are internally inconsistent."""

    def __init__(self, errors: Sequence[str]) -> None:
        """Initialize the error.

        Args:
            errors: Every validation error found, in discovery order.
        """

        joined = "\n".join(f"- {err}" for err in errors)
        super().__init__(f"Invalid chart datasets:\n{joined}")
        self.errors = tuple(errors)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of validating the static datasets."""

    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    def raise_for_errors(self) -> None:
        """Raise DatasetValidationError when the result has errors."""

        if self.errors:
            raise DatasetValidationError(self.errors)


def validate_datasets(categories: Sequence[Category], drilldown: DrilldownDataset) -> ValidationResult:
    """Validate overview categories against the drilldown dataset.

    Args:
        categories: Overview categories in series-definition order.
        drilldown: Category name to sub-entries mapping.

    Returns:
        ValidationResult containing errors and warnings. Categories without
        a breakdown are a warning only; they render an empty drilldown.
    """

    errors: list[str] = []
    warnings: list[str] = []

    if not categories:
        errors.append("categories must contain at least one entry.")

    seen: set[str] = set()
    for idx, category in enumerate(categories):
        if not isinstance(category.name, str) or not category.name.strip():
            errors.append(f"categories[{idx}].name must be a non-empty string.")
        elif category.name in seen:
            errors.append(f"Duplicate category name: {category.name!r}.")
        else:
            seen.add(category.name)
        if not _is_valid_value(category.value):
            errors.append(f"categories[{idx}].value must be a finite, non-negative number: {category.value!r}.")

    if categories and all(_is_valid_value(c.value) for c in categories):
        if sum(c.value for c in categories) == 0:
            errors.append("categories must not all have a zero value.")

    for key, entries in drilldown.items():
        if key not in seen:
            errors.append(f"Drilldown key {key!r} does not match any category.")
        for idx, entry in enumerate(entries):
            if not isinstance(entry.name, str) or not entry.name.strip():
                errors.append(f"drilldown[{key!r}][{idx}].name must be a non-empty string.")
            if not _is_valid_value(entry.value):
                errors.append(
                    f"drilldown[{key!r}][{idx}].value must be a finite, non-negative number: {entry.value!r}."
                )

    for name in sorted(seen - set(drilldown)):
        warnings.append(f"Category {name!r} has no drilldown entries.")

    return ValidationResult(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))


def _is_valid_value(value: object) -> bool:
    """Return True for finite, non-negative real numbers (bools excluded)."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0
