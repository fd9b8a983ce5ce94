"""Pure derivation package for the linked pie and drilldown charts.

This package contains deterministic, testable computations (slice geometry,
color ramps, drilldown assembly) that operate on in-memory inputs. It must
not import the rendering layer in `core`.
"""

from .colors import ColorParseError, generate_ramp
from .drilldown import assemble
from .geometry import compute_start_angle, percentage_to_degree

__all__ = ["ColorParseError", "assemble", "compute_start_angle", "generate_ramp", "percentage_to_degree"]
