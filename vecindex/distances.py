"""Reference single-precision distance kernels."""

from __future__ import annotations

import numpy as np

_ARGMIN_START = np.float32(1e20)


def _vec(x) -> np.ndarray:
    arr = np.asarray(x, dtype=np.float32)
    if arr.ndim != 1:
        raise ValueError("expected a one-dimensional vector")
    return arr


def _pair(x, y) -> tuple[np.ndarray, np.ndarray]:
    xa, ya = _vec(x), _vec(y)
    if xa.shape != ya.shape:
        raise ValueError("vectors must have the same length")
    return xa, ya


def _matrix(x: np.ndarray, ys) -> np.ndarray:
    arr = np.asarray(ys, dtype=np.float32)
    if arr.ndim == 1 and arr.size == 0:
        arr = arr.reshape(0, x.shape[0])
    if arr.ndim != 2 or arr.shape[1] != x.shape[0]:
        raise ValueError("ys must be a 2-D array with rows as long as x")
    return arr


def l2sqr(x, y) -> float:
    """Squared L2 distance between two vectors."""
    xa, ya = _pair(x, y)
    diff = xa - ya
    return float(np.sum(diff * diff, dtype=np.float32))


def inner_product(x, y) -> float:
    """Inner product of two vectors."""
    xa, ya = _pair(x, y)
    return float(np.sum(xa * ya, dtype=np.float32))


def l1(x, y) -> float:
    """L1 distance between two vectors."""
    xa, ya = _pair(x, y)
    return float(np.sum(np.abs(xa - ya), dtype=np.float32))


def linf(x, y) -> float:
    """L-infinity distance between two vectors."""
    xa, ya = _pair(x, y)
    return float(np.fmax.reduce(np.abs(xa - ya), initial=np.float32(0)))


def norm_l2sqr(x) -> float:
    """Squared L2 norm, accumulated in double precision."""
    xa = _vec(x)
    squares = (xa * xa).astype(np.float64)
    return float(np.float32(np.sum(squares)))


def l2sqr_ny(x, ys) -> np.ndarray:
    """Squared L2 distances between ``x`` and each row of ``ys``."""
    xa = _vec(x)
    mat = _matrix(xa, ys)
    diff = mat - xa
    return np.sum(diff * diff, axis=1, dtype=np.float32)


def inner_products_ny(x, ys) -> np.ndarray:
    """Inner products between ``x`` and each row of ``ys``."""
    xa = _vec(x)
    mat = _matrix(xa, ys)
    return np.sum(mat * xa, axis=1, dtype=np.float32)


def madd(a, bf: float, b) -> np.ndarray:
    """Return ``a + bf * b`` element-wise."""
    aa, ba = _pair(a, b)
    return aa + np.float32(bf) * ba


def madd_and_argmin(a, bf: float, b) -> tuple[np.ndarray, int]:
    """Return ``a + bf * b`` and the index of its first minimum below 1e20, or -1."""
    c = madd(a, bf, b)
    below = c < _ARGMIN_START
    if not np.any(below):
        return c, -1
    return c, int(np.argmin(np.where(below, c, np.inf)))