"""Axis-aligned bounding boxes of any dimension."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence, Tuple, Union

from noripath.ray import Ray

Point = Tuple[float, ...]


def _format_point(values: Sequence[float]) -> str:
    return "[" + ", ".join(f"{v:f}" for v in values) + "]"


class BoundingBox:
    """An axis-aligned box stored as componentwise ``min`` and ``max`` points.

    A box whose minimum exceeds its maximum along some axis is invalid and
    covers no space; :meth:`empty` builds one that any expansion will fix.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, lower: Iterable[float], upper: Iterable[float]) -> None:
        self.min: Point = tuple(float(v) for v in lower)
        self.max: Point = tuple(float(v) for v in upper)
        if len(self.min) != len(self.max):
            raise ValueError("minimum and maximum must have the same dimension")

    @classmethod
    def from_point(cls, point: Iterable[float]) -> BoundingBox:
        """Create a box collapsed onto a single point."""
        coords = tuple(point)
        return cls(coords, coords)

    @classmethod
    def empty(cls, dimension: int = 3) -> BoundingBox:
        """Create an invalid box with min at +inf and max at -inf."""
        return cls((math.inf,) * dimension, (-math.inf,) * dimension)

    @property
    def dimension(self) -> int:
        return len(self.min)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundingBox):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __repr__(self) -> str:
        return f"BoundingBox({self.min!r}, {self.max!r})"

    def __str__(self) -> str:
        if not self.is_valid():
            return "BoundingBox[invalid]"
        return f"BoundingBox[min={_format_point(self.min)}, max={_format_point(self.max)}]"

    def volume(self) -> float:
        """The n-dimensional volume of the box."""
        return math.prod(self.extents())

    def surface_area(self) -> float:
        """The (n-1)-dimensional volume of the box's boundary."""
        d = self.extents()
        total = sum(
            math.prod(e for j, e in enumerate(d) if j != i) for i in range(len(d))
        )
        return 2.0 * total

    def center(self) -> Point:
        return tuple((lo + hi) * 0.5 for lo, hi in zip(self.min, self.max))

    @staticmethod
    def _bounds_of(other: Union[BoundingBox, Iterable[float]]) -> tuple[Point, Point]:
        if isinstance(other, BoundingBox):
            return other.min, other.max
        coords = tuple(float(v) for v in other)
        return coords, coords

    def contains(self, other: Union[BoundingBox, Iterable[float]], strict: bool = False) -> bool:
        """Whether a point or a box lies on or inside this box.

        With ``strict`` the boundary is excluded. An invalid box argument is
        always contained.
        """
        lo, hi = self._bounds_of(other)
        if strict:
            return all(a > m for a, m in zip(lo, self.min)) and all(
                b < m for b, m in zip(hi, self.max)
            )
        return all(a >= m for a, m in zip(lo, self.min)) and all(
            b <= m for b, m in zip(hi, self.max)
        )

    def overlaps(self, other: BoundingBox, strict: bool = False) -> bool:
        """Whether two boxes overlap; ``strict`` excludes touching boundaries."""
        if strict:
            return all(a < m for a, m in zip(other.min, self.max)) and all(
                b > m for b, m in zip(other.max, self.min)
            )
        return all(a <= m for a, m in zip(other.min, self.max)) and all(
            b >= m for b, m in zip(other.max, self.min)
        )

    def squared_distance_to(self, other: Union[BoundingBox, Iterable[float]]) -> float:
        """Smallest squared distance to a point or another box."""
        lo, hi = self._bounds_of(other)
        result = 0.0
        for o_lo, o_hi, s_lo, s_hi in zip(lo, hi, self.min, self.max):
            if o_hi < s_lo:
                value = s_lo - o_hi
            elif o_lo > s_hi:
                value = o_lo - s_hi
            else:
                value = 0.0
            result += value * value
        return result

    def distance_to(self, other: Union[BoundingBox, Iterable[float]]) -> float:
        """Smallest distance to a point or another box."""
        return math.sqrt(self.squared_distance_to(other))

    def is_valid(self) -> bool:
        return all(hi >= lo for lo, hi in zip(self.min, self.max))

    def is_point(self) -> bool:
        return all(hi == lo for lo, hi in zip(self.min, self.max))

    def has_volume(self) -> bool:
        return all(hi > lo for lo, hi in zip(self.min, self.max))

    def major_axis(self) -> int:
        """Index of the longest side; ties go to the lower index."""
        d = self.extents()
        return max(range(len(d)), key=d.__getitem__)

    def minor_axis(self) -> int:
        """Index of the shortest side; ties go to the lower index."""
        d = self.extents()
        return min(range(len(d)), key=d.__getitem__)

    def largest_axis(self) -> int:
        """Index of the largest extent, preferring the lowest index on ties."""
        d = self.extents()
        for axis, extent in enumerate(d):
            if all(extent >= e for e in d):
                return axis
        return len(d) - 1

    def extents(self) -> Point:
        return tuple(hi - lo for lo, hi in zip(self.min, self.max))

    def clip(self, other: BoundingBox) -> None:
        """Shrink this box to its intersection with ``other``."""
        self.min = tuple(max(a, b) for a, b in zip(self.min, other.min))
        self.max = tuple(min(a, b) for a, b in zip(self.max, other.max))

    def reset(self) -> None:
        """Mark the box as invalid."""
        n = self.dimension
        self.min = (math.inf,) * n
        self.max = (-math.inf,) * n

    def expand_by(self, other: Union[BoundingBox, Iterable[float]]) -> None:
        """Grow the box to contain a point or another box."""
        lo, hi = self._bounds_of(other)
        self.min = tuple(min(a, b) for a, b in zip(self.min, lo))
        self.max = tuple(max(a, b) for a, b in zip(self.max, hi))

    @staticmethod
    def merge(first: BoundingBox, second: BoundingBox) -> BoundingBox:
        """Return the smallest box containing both arguments."""
        return BoundingBox(
            (min(a, b) for a, b in zip(first.min, second.min)),
            (max(a, b) for a, b in zip(first.max, second.max)),
        )

    def corner(self, index: int) -> Point:
        """Corner whose i-th coordinate is max when bit i of ``index`` is set."""
        return tuple(
            hi if index & (1 << i) else lo
            for i, (lo, hi) in enumerate(zip(self.min, self.max))
        )

    def _slab(self, ray: Ray) -> Optional[tuple[float, float]]:
        near_t = -math.inf
        far_t = math.inf
        for origin, direction, rcp, lo, hi in zip(
            ray.origin, ray.direction, ray.direction_rcp, self.min, self.max
        ):
            if direction == 0:
                if origin < lo or origin > hi:
                    return None
                continue
            t1 = (lo - origin) * rcp
            t2 = (hi - origin) * rcp
            if t1 > t2:
                t1, t2 = t2, t1
            near_t = max(t1, near_t)
            far_t = min(t2, far_t)
            if not near_t <= far_t:
                return None
        return near_t, far_t

    def ray_intersect(self, ray: Ray) -> bool:
        """Whether the ray's segment ``[mint, maxt]`` meets the box."""
        overlap = self._slab(ray)
        if overlap is None:
            return False
        near_t, far_t = overlap
        return ray.mint <= far_t and near_t <= ray.maxt

    def ray_overlap(self, ray: Ray) -> Optional[tuple[float, float]]:
        """The ``(near, far)`` parameters where the unbounded ray is inside, or None."""
        return self._slab(ray)