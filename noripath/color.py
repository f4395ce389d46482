"""Linear RGB colours, with and without a reconstruction weight."""

from __future__ import annotations

import operator
from typing import Callable, Iterable, Iterator


class _ChannelArray:
    """A fixed-size array of float channels with element-wise arithmetic."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[float]) -> None:
        self._values = tuple(float(v) for v in values)

    @classmethod
    def _from_values(cls, values: Iterable[float]):
        return cls(*values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> float:
        return self._values[index]

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._values == other._values  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._values))

    def __repr__(self) -> str:
        args = ", ".join(repr(v) for v in self._values)
        return f"{type(self).__name__}({args})"

    def _combine(self, other: object, op: Callable[[float, float], float], swap=False):
        if isinstance(other, _ChannelArray):
            if type(other) is not type(self):
                return NotImplemented
            pairs = zip(self._values, other._values)
        elif isinstance(other, (int, float)):
            pairs = ((v, float(other)) for v in self._values)
        else:
            return NotImplemented
        if swap:
            return self._from_values(op(b, a) for a, b in pairs)
        return self._from_values(op(a, b) for a, b in pairs)

    def __add__(self, other):
        return self._combine(other, operator.add)

    def __radd__(self, other):
        return self._combine(other, operator.add, swap=True)

    def __sub__(self, other):
        return self._combine(other, operator.sub)

    def __rsub__(self, other):
        return self._combine(other, operator.sub, swap=True)

    def __mul__(self, other):
        return self._combine(other, operator.mul)

    def __rmul__(self, other):
        return self._combine(other, operator.mul, swap=True)

    def __truediv__(self, other):
        return self._combine(other, operator.truediv)

    def __rtruediv__(self, other):
        return self._combine(other, operator.truediv, swap=True)

    def __neg__(self):
        return self._from_values(-v for v in self._values)


class Color3f(_ChannelArray):
    """A linear RGB colour.

    ``Color3f(v)`` sets all channels to ``v``; ``Color3f(r, g, b)`` sets each.
    """

    __slots__ = ()

    def __init__(self, r: float = 0.0, g: float | None = None, b: float | None = None):
        if g is None and b is None:
            g = b = r
        elif g is None or b is None:
            raise TypeError("Color3f takes either one value or three channels")
        super().__init__((r, g, b))

    @property
    def r(self) -> float:
        return self._values[0]

    @property
    def g(self) -> float:
        return self._values[1]

    @property
    def b(self) -> float:
        return self._values[2]

    def clamp(self) -> Color3f:
        """Clamp every channel to the non-negative range."""
        return Color3f(*(max(v, 0.0) for v in self._values))

    def __str__(self) -> str:
        return "[{:f}, {:f}, {:f}]".format(*self._values)


class Color4f(_ChannelArray):
    """A linear RGB colour together with a filter weight."""

    __slots__ = ()

    def __init__(self, r: float = 0.0, g: float = 0.0, b: float = 0.0, w: float = 0.0):
        super().__init__((r, g, b, w))

    @classmethod
    def from_color3(cls, color: Color3f) -> Color4f:
        """Build a weighted colour with unit weight."""
        return cls(color.r, color.g, color.b, 1.0)

    @property
    def r(self) -> float:
        return self._values[0]

    @property
    def g(self) -> float:
        return self._values[1]

    @property
    def b(self) -> float:
        return self._values[2]

    @property
    def w(self) -> float:
        return self._values[3]

    def divide_by_filter_weight(self) -> Color3f:
        """Divide the colour by its weight; a zero weight gives black."""
        if self.w != 0:
            return Color3f(self.r / self.w, self.g / self.w, self.b / self.w)
        return Color3f(0.0)

    def __str__(self) -> str:
        return "[{:f}, {:f}, {:f}, {:f}]".format(*self._values)