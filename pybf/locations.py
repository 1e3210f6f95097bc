"""Bit offsets for a value via double hashing (Kirsch–Mitzenmacher).

Two seeded digests stand in for *k* independent hash functions:

    x₀ = a mod m,   xᵢ₊₁ = (xᵢ + b) mod m
"""
from __future__ import annotations

from collections.abc import Iterable

from .fnv import SEED_A, SEED_B, fnv_1a

__all__ = ["locations"]

_MASK32 = 0xFFFFFFFF


def locations(value: Iterable[int], k: int, m: int) -> list[int]:
    """Return *k* bit offsets in ``[0, m)`` for *value*.

    Offsets may repeat when ``b mod m`` has a small order; setting or testing
    the same bit twice is harmless.
    """
    if not isinstance(value, (bytes, bytearray, memoryview)):
        value = list(value)  # iterated twice below
    a = fnv_1a(value, SEED_A)
    b = fnv_1a(value, SEED_B)
    x = a % m
    r = []
    for _ in range(k):
        r.append(x)
        # the sum wraps at 32 bits before the reduction
        x = ((x + b) & _MASK32) % m
    return r
