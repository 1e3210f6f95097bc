"""Sizing helper for Bloom filters."""
from __future__ import annotations

import math

__all__ = ["estimate_parameters"]


def estimate_parameters(n: int, p: float) -> tuple[int, int]:
    """Estimate bit count *m* and hash count *k* for *n* items at false-positive rate *p*.

    *k* is derived from the raw *m*; *m* is rounded up to a multiple of 32
    afterwards. Inputs are not validated (``n > 0`` and ``0 < p < 1`` are the
    caller's job). See https://github.com/willf/bloom
    """
    m = math.ceil(-1 * n * math.log(p) / math.log(2) ** 2)
    k = math.ceil(math.log(2) * m / n)
    if m % 32:
        m += 32 - m % 32
    return m, k
