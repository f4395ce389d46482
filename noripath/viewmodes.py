"""Display modes of the path-graph viewer and the mapping of its slider controls.

Every slider reports a position in ``[0, 1]``; the helpers below turn that
position into the value the viewer works with.
"""

from __future__ import annotations

import math
from enum import IntEnum

_EXPOSURE_STOPS = 30.0
_EXPOSURE_OFFSET = 5.0
_MAX_NEIGHBORS = 65
_MAX_ITERATIONS = 80
_EIGEN_COMPONENTS = 6


class TransportType(IntEnum):
    """Which light-transport result is shown; values are combo-box indices."""

    BLUR_INDIRECT = 0
    BLUR_DIRECT = 1
    FULL = 2
    EIGENVECTORS = 3


class ColorType(IntEnum):
    """What the point colours encode; values are combo-box indices."""

    ELI = 0
    EIGENVECTOR = 1


def exposure_from_slider(value: float) -> float:
    """Exposure multiplier: a 30-stop range starting at 2**-5."""
    return math.pow(2.0, value * _EXPOSURE_STOPS - _EXPOSURE_OFFSET)


def k_from_slider(value: float) -> int:
    """Number of nearest neighbours, from 1 upwards."""
    return math.floor(value * _MAX_NEIGHBORS) + 1


def iteration_from_slider(value: float) -> int:
    """Index of the iteration whose result is displayed."""
    return math.floor(value * _MAX_ITERATIONS)


def eigen_index_from_slider(value: float) -> int:
    """Index of the large eigenvector component to follow."""
    return math.floor(value * _EIGEN_COMPONENTS)


def pixel_from_slider(value: float, resolution: int) -> int:
    """Pixel coordinate along an axis of ``resolution`` pixels."""
    return math.floor(value * (resolution - 1))