"""Runtime settings for the pie/drilldown chart core.

Settings are read from environment variables once, at import time, so hosts
can tune rendering-engine specific values (such as which angle the selected
slice is anchored to) without code changes. Modules read these values as
`settings.NAME` at call time, so reloading this module applies new values.
"""

from __future__ import annotations

import os


def _env_float(name: str, *, default: float) -> float:
    """Parse a float environment variable.

    Args:
        name: Environment variable name.
        default: Value when the variable is not set.

    Returns:
        Parsed float value.

    Raises:
        ValueError: When the variable is set but is not a number.
    """

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}.") from exc


def _env_int(name: str, *, default: int) -> int:
    """Parse an integer environment variable.

    Args:
        name: Environment variable name.
        default: Value when the variable is not set.

    Returns:
        Parsed integer value.

    Raises:
        ValueError: When the variable is set but is not an integer.
    """

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from exc


# Angle (degrees) at which the selected slice's midpoint is kept. Which compass
# position 0 degrees maps to depends on the rendering engine.
ANCHOR_ANGLE = _env_float("PIE_ANCHOR_ANGLE", default=90.0)

RAMP_LIGHTNESS_DELTA = _env_int("PIE_RAMP_LIGHTNESS_DELTA", default=20)
RAMP_MIN_STOPS = _env_int("PIE_RAMP_MIN_STOPS", default=2)

LOG_LEVEL = (os.getenv("PIE_LOG_LEVEL") or "WARNING").strip().upper()

if RAMP_MIN_STOPS < 2:
    raise ValueError(f"PIE_RAMP_MIN_STOPS must be at least 2, got {RAMP_MIN_STOPS}.")
