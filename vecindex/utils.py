"""Hashing of vectors and integer alignment helpers."""

from __future__ import annotations

import numpy as np

SEED = 0xC70F6907
_MASK64 = (1 << 64) - 1
_MULTIPLIER = 13331


def _fold(words) -> int:
    h = SEED
    for word in words:
        h = (h * _MULTIPLIER + word) & _MASK64
    return h


def hash_vec(x) -> int:
    """64-bit hash of a float vector, computed over the bit patterns of its float32 values."""
    arr = np.ascontiguousarray(x, dtype=np.float32).ravel()
    return _fold(arr.view(np.uint32).tolist())


def hash_binary_vec(x, d: int) -> int:
    """64-bit hash of a packed binary vector of ``d`` bits."""
    length = (d + 7) // 8
    data = bytes(x)
    if len(data) < length:
        raise ValueError("binary vector is shorter than its dimension")
    return _fold(data[:length])


def round_down(value: int, align: int) -> int:
    """Round ``value`` toward zero to a multiple of ``align``."""
    if align == 0:
        raise ZeroDivisionError("align must not be zero")
    quotient = abs(value) // abs(align)
    if (value < 0) != (align < 0):
        quotient = -quotient
    return quotient * align