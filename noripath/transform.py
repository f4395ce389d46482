"""Homogeneous 4x4 coordinate transformations."""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np

from noripath.ray import Ray


def _as_matrix(values) -> np.ndarray:
    matrix = np.array(values, dtype=float)
    if matrix.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {matrix.shape}")
    matrix.setflags(write=False)
    return matrix


class Transform:
    """A homogeneous transformation together with its inverse.

    Without arguments this is the identity. When only ``matrix`` is given the
    inverse is computed; a singular matrix raises ``numpy.linalg.LinAlgError``.
    """

    def __init__(self, matrix=None, inverse=None) -> None:
        if matrix is None:
            self._matrix = _as_matrix(np.identity(4))
            self._inverse = self._matrix if inverse is None else _as_matrix(inverse)
            return
        self._matrix = _as_matrix(matrix)
        if inverse is None:
            self._inverse = _as_matrix(np.linalg.inv(self._matrix))
        else:
            self._inverse = _as_matrix(inverse)

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix

    @property
    def inverse_matrix(self) -> np.ndarray:
        return self._inverse

    def inverse(self) -> Transform:
        """Return the inverse transformation."""
        return Transform(self._inverse, self._matrix)

    def __matmul__(self, other: Transform) -> Transform:
        """Concatenate: ``(a @ b)`` applies ``b`` first, then ``a``."""
        if not isinstance(other, Transform):
            return NotImplemented
        return Transform(self._matrix @ other._matrix, other._inverse @ self._inverse)

    def apply_vector(self, v: Iterable[float]) -> tuple[float, ...]:
        """Transform a direction, ignoring translation."""
        result = self._matrix[:3, :3] @ np.asarray(tuple(v), dtype=float)
        return tuple(float(c) for c in result)

    def apply_normal(self, n: Iterable[float]) -> tuple[float, ...]:
        """Transform a surface normal by the inverse transpose."""
        result = self._inverse[:3, :3].T @ np.asarray(tuple(n), dtype=float)
        return tuple(float(c) for c in result)

    def apply_point(self, p: Iterable[float]) -> tuple[float, ...]:
        """Transform a point in homogeneous coordinates, dividing by w."""
        x, y, z = (float(c) for c in p)
        result = self._matrix @ np.array([x, y, z, 1.0])
        return tuple(float(c) for c in result[:3] / result[3])

    def apply_ray(self, ray: Ray) -> Ray:
        """Transform a ray's origin and direction, keeping its segment."""
        return Ray(
            self.apply_point(ray.origin),
            self.apply_vector(ray.direction),
            ray.mint,
            ray.maxt,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return bool(
            np.array_equal(self._matrix, other._matrix)
            and np.array_equal(self._inverse, other._inverse)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Transform({self._matrix.tolist()!r})"

    def __str__(self) -> str:
        rows = ",\n ".join(
            "[" + ", ".join(f"{v:f}" for v in row) + "]" for row in self._matrix
        )
        return f"[{rows}]"


def _optional(matrix: Optional[np.ndarray]) -> Optional[np.ndarray]:
    return None if matrix is None else _as_matrix(matrix)