"""Bunch-Kaufman LDL^T factorization of symmetric, possibly indefinite matrices."""

from __future__ import annotations

import math
from enum import Enum, IntEnum
from typing import Optional

import numpy as np

_ALPHA = (1.0 + math.sqrt(17.0)) / 8.0


class CompInfo(IntEnum):
    """Status of a computation."""

    SUCCESSFUL = 0
    NOT_COMPUTED = 1
    NOT_CONVERGING = 2
    NUMERICAL_ISSUE = 3


class Uplo(Enum):
    """Which triangle of the input matrix holds the data."""

    LOWER = "lower"
    UPPER = "upper"


class BKLDLT:
    """Factorizes ``A - shift * I`` as ``P A P' = L D L'`` with 1x1 and 2x2 pivots.

    Only the chosen triangle of the input matrix is read. A singular pivot is
    reported through :attr:`info` as ``CompInfo.NUMERICAL_ISSUE``.
    """

    def __init__(self, matrix=None, uplo: Uplo = Uplo.LOWER, shift: float = 0.0) -> None:
        self._n = 0
        self._data = np.zeros((0, 0))
        self._perm = np.zeros(0, dtype=np.int64)
        self._permc: list[tuple[int, int]] = []
        self._computed = False
        self._info = CompInfo.NOT_COMPUTED
        if matrix is not None:
            self.compute(matrix, uplo, shift)

    @property
    def info(self) -> CompInfo:
        return self._info

    @property
    def computed(self) -> bool:
        return self._computed

    def compute(self, matrix, uplo: Uplo = Uplo.LOWER, shift: float = 0.0) -> None:
        """Factorize ``matrix - shift * I``."""
        mat = np.array(matrix, dtype=float)
        if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
            raise ValueError("BKLDLT: matrix must be square")
        n = mat.shape[0]
        self._n = n
        self._perm = np.arange(n, dtype=np.int64)
        self._permc = []

        source = mat if uplo is Uplo.LOWER else mat.T
        self._data = np.tril(source).copy()
        self._data[np.diag_indices(n)] -= shift

        k = 0
        while k < n - 1:
            if self._permutate_mat(k):
                self._info = self._gaussian_elimination_1x1(k)
            else:
                self._info = self._gaussian_elimination_2x2(k)
                k += 1
            if self._info is not CompInfo.SUCCESSFUL:
                break
            k += 1

        if k == n - 1:
            if self._data[k, k] == 0.0:
                self._info = CompInfo.NUMERICAL_ISSUE
            with np.errstate(divide="ignore"):
                self._data[k, k] = np.float64(1.0) / self._data[k, k]

        self._compress_permutation()
        self._computed = True

    def solve(self, b) -> np.ndarray:
        """Return ``x`` solving ``A x = b`` for the factorized matrix."""
        if not self._computed:
            raise RuntimeError("BKLDLT: need to call compute() first")
        x = np.array(b, dtype=float)
        n = self._n
        if x.shape != (n,):
            raise ValueError(f"BKLDLT: right-hand side must have shape ({n},)")
        if n == 0:
            return x
        a = self._data
        perm = self._perm

        for first, second in self._permc:
            x[first], x[second] = x[second], x[first]

        last = n - 3 if perm[n - 1] < 0 else n - 2
        i = 0
        while i <= last:
            if perm[i] >= 0:
                x[i + 1:] -= a[i + 1:, i] * x[i]
            else:
                x[i + 2:] -= a[i + 2:, i] * x[i] + a[i + 2:, i + 1] * x[i + 1]
                i += 1
            i += 1

        i = 0
        while i < n:
            e11 = a[i, i]
            if perm[i] >= 0:
                x[i] *= e11
            else:
                e21 = a[i + 1, i]
                e22 = a[i + 1, i + 1]
                wi = x[i] * e11 + x[i + 1] * e21
                x[i + 1] = x[i] * e21 + x[i + 1] * e22
                x[i] = wi
                i += 1
            i += 1

        i = n - 3 if perm[n - 1] < 0 else n - 2
        while i >= 0:
            tail = x[i + 1:]
            x[i] -= tail @ a[i + 1:, i]
            if perm[i] < 0:
                x[i - 1] -= tail @ a[i + 1:, i - 1]
                i -= 1
            i -= 1

        for first, second in reversed(self._permc):
            x[first], x[second] = x[second], x[first]
        return x

    def _compress_permutation(self) -> None:
        for i, entry in enumerate(self._perm):
            target = int(entry) if entry >= 0 else int(-entry - 1)
            if target != i:
                self._permc.append((i, target))

    def _pivoting_1x1(self, k: int, r: int) -> None:
        a = self._data
        if k == r:
            self._perm[k] = r
            return
        a[k, k], a[r, r] = a[r, r], a[k, k]
        below = a[r + 1:, k].copy()
        a[r + 1:, k] = a[r + 1:, r]
        a[r + 1:, r] = below
        between = a[k + 1:r, k].copy()
        a[k + 1:r, k] = a[r, k + 1:r]
        a[r, k + 1:r] = between
        self._perm[k] = r

    def _pivoting_2x2(self, k: int, r: int, p: int) -> None:
        a = self._data
        self._pivoting_1x1(k, p)
        self._pivoting_1x1(k + 1, r)
        a[k + 1, k], a[r, k] = a[r, k], a[k + 1, k]
        self._perm[k] = -self._perm[k] - 1
        self._perm[k + 1] = -self._perm[k + 1] - 1

    def _interchange_rows(self, r1: int, r2: int, c1: int, c2: int) -> None:
        if r1 == r2:
            return
        a = self._data
        row = a[r1, c1:c2 + 1].copy()
        a[r1, c1:c2 + 1] = a[r2, c1:c2 + 1]
        a[r2, c1:c2 + 1] = row

    def _find_lambda(self, k: int) -> tuple[float, int]:
        column = self._data[k + 1:, k]
        lam = abs(column[0])
        r = k + 1
        for offset, value in enumerate(column[1:], start=2):
            if lam < abs(value):
                lam = abs(value)
                r = k + offset
        return float(lam), r

    def _find_sigma(self, k: int, r: int, p: int) -> tuple[float, int]:
        sigma = -1.0
        if r < self._n - 1:
            sigma, p = self._find_lambda(r)
        for j in range(k, r):
            value = abs(self._data[r, j])
            if sigma < value:
                sigma = float(value)
                p = j
        return sigma, p

    def _permutate_mat(self, k: int) -> bool:
        """Choose and apply a pivot; return True for 1x1, False for 2x2."""
        lam, r = self._find_lambda(k)
        p = k
        if lam > 0.0:
            abs_akk = abs(self._data[k, k])
            if abs_akk < _ALPHA * lam:
                sigma, p = self._find_sigma(k, r, p)
                if sigma * abs_akk < _ALPHA * lam * lam:
                    if abs_akk >= _ALPHA * sigma:
                        self._pivoting_1x1(k, r)
                        self._interchange_rows(k, r, 0, k - 1)
                        return True
                    rp_min, rp_max = min(r, p), max(r, p)
                    if rp_min == k + 1:
                        r, p = rp_min, rp_max
                    else:
                        r, p = rp_max, rp_min
                    self._pivoting_2x2(k, r, p)
                    self._interchange_rows(k, p, 0, k - 1)
                    self._interchange_rows(k + 1, r, 0, k - 1)
                    return False
        return True

    def _gaussian_elimination_1x1(self, k: int) -> CompInfo:
        a = self._data
        akk = a[k, k]
        if akk == 0.0:
            return CompInfo.NUMERICAL_ISSUE
        a[k, k] = 1.0 / akk
        l = a[k + 1:, k].copy()
        a[k + 1:, k + 1:] -= np.tril(np.outer(l, l / akk))
        a[k + 1:, k] = l / akk
        return CompInfo.SUCCESSFUL

    def _gaussian_elimination_2x2(self, k: int) -> CompInfo:
        a = self._data
        e11, e21, e22 = a[k, k], a[k + 1, k], a[k + 1, k + 1]
        delta = e11 * e22 - e21 * e21
        if delta == 0.0:
            return CompInfo.NUMERICAL_ISSUE
        e11, e22 = e22 / delta, e11 / delta
        e21 = -e21 / delta
        a[k, k], a[k + 1, k], a[k + 1, k + 1] = e11, e21, e22

        l1 = a[k + 2:, k].copy()
        l2 = a[k + 2:, k + 1].copy()
        x0 = l1 * e11 + l2 * e21
        x1 = l1 * e21 + l2 * e22
        a[k + 2:, k + 2:] -= np.tril(np.outer(x0, l1) + np.outer(x1, l2))
        a[k + 2:, k] = x0
        a[k + 2:, k + 1] = x1
        return CompInfo.SUCCESSFUL


def _optional_info(solver: Optional[BKLDLT]) -> CompInfo:
    return CompInfo.NOT_COMPUTED if solver is None else solver.info