"""Mouse-driven rotation controller."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

_IDENTITY = (1.0, 0.0, 0.0, 0.0)


def _qmul(a: Sequence[float], b: Sequence[float]) -> tuple[float, float, float, float]:
    w1, x1, y1, z1 = a
    w2, x2, y2, z2 = b
    return (
        w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
        w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
        w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
        w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
    )


def _norm(values: Sequence[float]) -> float:
    return math.sqrt(sum(v * v for v in values))


def _normalized(values: Sequence[float]) -> tuple[float, ...]:
    length = _norm(values)
    if length > 0:
        return tuple(v / length for v in values)
    return tuple(values)


def _cross(a: Sequence[float], b: Sequence[float]) -> tuple[float, float, float]:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return sum(x * y for x, y in zip(a, b))


def _rotation_matrix(q: Sequence[float]) -> np.ndarray:
    w, x, y, z = q
    tx, ty, tz = 2 * x, 2 * y, 2 * z
    twx, twy, twz = tx * w, ty * w, tz * w
    txx, txy, txz = tx * x, ty * x, tz * x
    tyy, tyz, tzz = ty * y, tz * y, tz * z
    return np.array(
        [
            [1 - (tyy + tzz), txy - twz, txz + twy],
            [txy + twz, 1 - (txx + tzz), tyz - twx],
            [txz - twy, tyz + twx, 1 - (txx + tyy)],
        ]
    )


class Arcball:
    """Turns mouse drags inside a window of ``size`` pixels into a rotation.

    While a button is held, :meth:`motion` tracks the rotation since the
    press; releasing the button folds it into the stable state.
    """

    def __init__(self, speed_factor: float = 2.0) -> None:
        self.speed_factor = speed_factor
        self.size: tuple[int, int] = (0, 0)
        self._active = False
        self._last_pos: tuple[int, int] = (0, 0)
        self._quat: tuple[float, ...] = _IDENTITY
        self._incr: tuple[float, ...] = _IDENTITY

    @property
    def active(self) -> bool:
        return self._active

    def button(self, pos: Sequence[int], pressed: bool) -> None:
        """Report a button press or release at ``pos``."""
        self._active = bool(pressed)
        self._last_pos = (pos[0], pos[1])
        if not self._active:
            self._quat = _normalized(_qmul(self._incr, self._quat))
        self._incr = _IDENTITY

    def motion(self, pos: Sequence[int]) -> bool:
        """Report a cursor move; return whether the arcball consumed it."""
        if not self._active:
            return False

        w, h = float(self.size[0]), float(self.size[1])
        min_dim = min(self.size)
        if min_dim <= 0:
            return True
        inv_min_dim = 1.0 / min_dim
        s = self.speed_factor
        lx, ly = self._last_pos

        ox = ((s * (2 * lx - w) + w) - w - 1.0) * inv_min_dim
        tx = ((s * (2 * pos[0] - w) + w) - w - 1.0) * inv_min_dim
        oy = ((s * (h - 2 * ly) + h) - h - 1.0) * inv_min_dim
        ty = ((s * (h - 2 * pos[1]) + h) - h - 1.0) * inv_min_dim

        v0 = (ox, oy, 1.0)
        v1 = (tx, ty, 1.0)
        if _dot(v0, v0) > 1e-4 and _dot(v1, v1) > 1e-4:
            v0 = _normalized(v0)
            v1 = _normalized(v1)
            axis = _cross(v0, v1)
            sa = math.sqrt(_dot(axis, axis))
            ca = _dot(v0, v1)
            angle = math.atan2(sa, ca)
            if tx * tx + ty * ty > 1.0:
                angle *= 1.0 + 0.2 * (math.sqrt(tx * tx + ty * ty) - 1.0)
            axis = _normalized(axis)
            half = angle / 2.0
            sin_half = math.sin(half)
            incr = (math.cos(half), *(sin_half * a for a in axis))
            self._incr = incr if math.isfinite(_norm(incr)) else _IDENTITY
        return True

    def matrix(self) -> np.ndarray:
        """Return the current rotation as a 4x4 homogeneous matrix."""
        result = np.identity(4)
        result[:3, :3] = _rotation_matrix(_qmul(self._incr, self._quat))
        return result