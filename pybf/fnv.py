"""Seeded Fowler/Noll/Vo (FNV-1a) hashing.

Nonstandard variation: the seed is folded into the offset basis. According to
http://www.isthe.com/chongo/tech/comp/fnv/index.html "almost any offset_basis
will serve so long as it is non-zero".

Output is bit-exact with filters exported by other implementations of the same
scheme, so none of the arithmetic below may be "simplified":

    • every step wraps at 32 bits
    • codes wider than a byte hash their high byte first
    • the result goes through a final avalanche mix
"""
from __future__ import annotations

from collections.abc import Iterable

__all__ = ["fnv_1a", "SEED_A", "SEED_B"]

_OFFSET_BASIS = 2166136261
_MASK32 = 0xFFFFFFFF

# Seeds of the two digests used for double hashing.
SEED_A = 0
SEED_B = 1576284489


def _fnv_multiply(a: int) -> int:
    """a * 16777619 mod 2**32"""
    return (a + (a << 1) + (a << 4) + (a << 7) + (a << 8) + (a << 24)) & _MASK32


def _fnv_mix(a: int) -> int:
    # https://web.archive.org/web/20131019013225/http://home.comcast.net/~bretm/hash/6.html
    a = (a + (a << 13)) & _MASK32
    a ^= a >> 7
    a = (a + (a << 3)) & _MASK32
    a ^= a >> 17
    a = (a + (a << 5)) & _MASK32
    return a


def fnv_1a(value: Iterable[int], seed: int = SEED_A) -> int:
    """Return the 32-bit digest of *value* under *seed*.

    *value* is any iterable of integer codes. ``bytes`` and friends only
    yield 0-255, in which case the high-byte step never fires.
    """
    a = (_OFFSET_BASIS ^ seed) & _MASK32
    for c in value:
        d = c & 0xFF00
        if d:
            a = _fnv_multiply(a ^ (d >> 8))
        a = _fnv_multiply(a ^ (c & 0xFF))
    return _fnv_mix(a)
