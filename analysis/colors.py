"""Color conversion and lightness ramps for drilldown series.

Drilldown bars are colored with a ramp derived from the selected slice's
color so that both linked charts read as one unit: same hue and saturation,
lightness stepping from a lighter to a darker variant of the base color.

HSL values use the common integer convention (hue in degrees, saturation and
lightness in percent).
"""

from __future__ import annotations

import colorsys
import re

DEFAULT_LIGHTNESS_DELTA = 20
MIN_RAMP_STOPS = 2

_HEX_PATTERN = re.compile(r"^#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class ColorParseError(ValueError):
    """Raised when a color string cannot be parsed as a hex color."""

    def __init__(self, *, raw_value: object) -> None:
        """Initialize the error.

        Args:
            raw_value: The rejected input.
        """

        super().__init__(f"Unparseable color {raw_value!r}: expected '#rgb' or '#rrggbb'.")
        self.raw_value = raw_value


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Parse `#rgb` / `#rrggbb` (leading `#` optional) into 0-255 channels.

    Raises:
        ColorParseError: When `value` is not a hex color string.
    """

    if not isinstance(value, str) or not _HEX_PATTERN.match(value.strip()):
        raise ColorParseError(raw_value=value)
    digits = value.strip().lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    """Format 0-255 channels as a lowercase `#rrggbb` string."""

    return "#" + "".join(f"{max(0, min(255, int(c))):02x}" for c in rgb)


def hex_to_hsl(value: str) -> tuple[int, int, int]:
    """Convert a hex color into integer (hue, saturation, lightness)."""

    r, g, b = hex_to_rgb(value)
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    return round(h * 360) % 360, round(s * 100), round(l * 100)


def hsl_to_hex(hsl: tuple[float, float, float]) -> str:
    """Convert (hue, saturation, lightness) back into `#rrggbb`."""

    h, s, l = hsl
    r, g, b = colorsys.hls_to_rgb((h % 360) / 360, _clamp_percent(l) / 100, _clamp_percent(s) / 100)
    return rgb_to_hex((round(r * 255), round(g * 255), round(b * 255)))


def lightness_endpoints(
    base_color: str,
    *,
    lightness_delta: int = DEFAULT_LIGHTNESS_DELTA,
) -> tuple[tuple[int, int, int], tuple[int, int, int]]:
    """Return the (light, dark) HSL endpoints around a base color.

    Lightness is shifted by `lightness_delta` in each direction and clamped to
    0-100; hue and saturation are kept.
    """

    h, s, l = hex_to_hsl(base_color)
    light = (h, s, _clamp_percent(l + lightness_delta))
    dark = (h, s, _clamp_percent(l - lightness_delta))
    return light, dark


def generate_ramp(
    base_color: str,
    stop_count: int,
    *,
    lightness_delta: int = DEFAULT_LIGHTNESS_DELTA,
    min_stops: int = MIN_RAMP_STOPS,
) -> list[str]:
    """Generate an evenly spaced light-to-dark ramp around `base_color`.

    Args:
        base_color: Hex color of the selected slice.
        stop_count: Requested number of colors.
        lightness_delta: Lightness offset of each endpoint from the base.
        min_stops: Minimum ramp length, so a single entry still gets a
            valid gradient. Values below two are raised to two.

    Returns:
        `max(stop_count, min_stops, 2)` hex colors. Index 0 is the light endpoint
        and the last index is the dark endpoint; lightness never increases.

    Raises:
        ColorParseError: When `base_color` is not a valid hex color.
    """

    (h, s, light_l), (_, _, dark_l) = lightness_endpoints(base_color, lightness_delta=lightness_delta)
    stops = max(stop_count, min_stops, MIN_RAMP_STOPS)
    step = (dark_l - light_l) / (stops - 1)
    return [hsl_to_hex((h, s, light_l + step * i)) for i in range(stops)]


def _clamp_percent(value: float) -> float:
    """Clamp a percentage into 0-100."""

    return max(0, min(100, value))
