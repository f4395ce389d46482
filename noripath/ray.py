"""Ray segments with precomputed reciprocal directions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

EPSILON = 1e-4


def _reciprocal(component: float) -> float:
    if component == 0:
        return math.copysign(math.inf, component)
    return 1.0 / component


def _format_vector(values: Sequence[float]) -> str:
    return "[" + ", ".join(f"{v:f}" for v in values) + "]"


@dataclass
class Ray:
    """A ray with an origin, a direction and a segment ``[mint, maxt]``.

    After changing ``direction`` call :meth:`update` to refresh
    ``direction_rcp``.
    """

    origin: tuple[float, ...]
    direction: tuple[float, ...]
    mint: float = EPSILON
    maxt: float = math.inf
    direction_rcp: tuple[float, ...] = field(default=(), init=False, compare=False)

    def __post_init__(self) -> None:
        self.origin = tuple(float(c) for c in self.origin)
        if len(self.origin) != len(tuple(self.direction)):
            raise ValueError("origin and direction must have the same dimension")
        self.update()

    def update(self) -> None:
        """Recompute the componentwise reciprocals of the direction."""
        self.direction = tuple(float(c) for c in self.direction)
        self.direction_rcp = tuple(_reciprocal(c) for c in self.direction)

    def at(self, t: float) -> tuple[float, ...]:
        """Return the point at parameter ``t`` along the ray."""
        return tuple(o + t * d for o, d in zip(self.origin, self.direction))

    def reverse(self) -> Ray:
        """Return a ray pointing the opposite way over the same segment."""
        result = Ray(self.origin, tuple(-c for c in self.direction), self.mint, self.maxt)
        result.direction_rcp = tuple(-c for c in self.direction_rcp)
        return result

    def with_segment(self, mint: float, maxt: float) -> Ray:
        """Return a copy of this ray covering ``[mint, maxt]``."""
        result = Ray(self.origin, self.direction, mint, maxt)
        result.direction_rcp = self.direction_rcp
        return result

    def __str__(self) -> str:
        return (
            "Ray[\n"
            f"  o = {_format_vector(self.origin)},\n"
            f"  d = {_format_vector(self.direction)},\n"
            f"  mint = {self.mint:f},\n"
            f"  maxt = {self.maxt:f}\n"
            "]"
        )