"""Orthonormal coordinate frames and local spherical-coordinate helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

Vector = Tuple[float, float, float]


def _as_vector(values: Iterable[float]) -> Vector:
    x, y, z = (float(c) for c in values)
    return (x, y, z)


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


def _divide(numerator: float, denominator: float) -> float:
    """Divide with the floating-point results for a zero denominator."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _format_vector(v: Sequence[float]) -> str:
    return "[" + ", ".join(f"{c:f}" for c in v) + "]"


@dataclass(frozen=True)
class Frame:
    """A three-dimensional orthonormal frame with tangents ``s``, ``t`` and normal ``n``."""

    s: Vector
    t: Vector
    n: Vector

    def __post_init__(self) -> None:
        object.__setattr__(self, "s", _as_vector(self.s))
        object.__setattr__(self, "t", _as_vector(self.t))
        object.__setattr__(self, "n", _as_vector(self.n))

    def to_local(self, v: Sequence[float]) -> Vector:
        """Convert from world coordinates to local coordinates."""
        return (_dot(v, self.s), _dot(v, self.t), _dot(v, self.n))

    def to_world(self, v: Sequence[float]) -> Vector:
        """Convert from local coordinates to world coordinates."""
        x, y, z = v
        return tuple(  # type: ignore[return-value]
            a * x + b * y + c * z for a, b, c in zip(self.s, self.t, self.n)
        )

    @staticmethod
    def cos_theta(v: Sequence[float]) -> float:
        """Cosine of the angle between the local normal and ``v``."""
        return float(v[2])

    @staticmethod
    def sin_theta2(v: Sequence[float]) -> float:
        """Squared sine of the angle between the local normal and ``v``."""
        return 1.0 - v[2] * v[2]

    @staticmethod
    def sin_theta(v: Sequence[float]) -> float:
        """Sine of the angle between the local normal and ``v``."""
        temp = Frame.sin_theta2(v)
        if temp <= 0.0:
            return 0.0
        return math.sqrt(temp)

    @staticmethod
    def tan_theta(v: Sequence[float]) -> float:
        """Tangent of the angle between the local normal and ``v``."""
        temp = 1.0 - v[2] * v[2]
        if temp <= 0.0:
            return 0.0
        return _divide(math.sqrt(temp), v[2])

    @staticmethod
    def sin_phi(v: Sequence[float]) -> float:
        """Sine of the azimuth of a local direction."""
        sin_theta = Frame.sin_theta(v)
        if sin_theta == 0.0:
            return 1.0
        return _clamp(v[1] / sin_theta, -1.0, 1.0)

    @staticmethod
    def cos_phi(v: Sequence[float]) -> float:
        """Cosine of the azimuth of a local direction."""
        sin_theta = Frame.sin_theta(v)
        if sin_theta == 0.0:
            return 1.0
        return _clamp(v[0] / sin_theta, -1.0, 1.0)

    @staticmethod
    def sin_phi2(v: Sequence[float]) -> float:
        """Squared sine of the azimuth of a local direction."""
        return _clamp(_divide(v[1] * v[1], Frame.sin_theta2(v)), 0.0, 1.0)

    @staticmethod
    def cos_phi2(v: Sequence[float]) -> float:
        """Squared cosine of the azimuth of a local direction."""
        return _clamp(_divide(v[0] * v[0], Frame.sin_theta2(v)), 0.0, 1.0)

    def __str__(self) -> str:
        return (
            "Frame[\n"
            f"  s = {_format_vector(self.s)},\n"
            f"  t = {_format_vector(self.t)},\n"
            f"  n = {_format_vector(self.n)}\n"
            "]"
        )