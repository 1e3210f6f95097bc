"""Thread-safe Bloom filter over 32-bit words.

Main goals:
    • bit-exact with filters exported by other implementations of the same
      hashing scheme (see :mod:`pybf.fnv`)
    • serialisable to raw big-endian words so it can be shipped anywhere
    • safe to share between threads without external locking

The hash count is *not* part of the raw byte form; callers must carry it
out-of-band (or use :mod:`pybf.snapshot`).
"""
from __future__ import annotations

import logging
import struct
from collections.abc import Iterable
from typing import ClassVar, Union

from .locations import locations
from .params import estimate_parameters
from .rwlock import RWLock

__all__ = ["BloomFilter"]

logger = logging.getLogger(__name__)

_WORD_BITS = 32
_MASK32 = 0xFFFFFFFF


class BloomFilter:
    """Bloom filter backed by a list of 32-bit words.

    Parameters
    ----------
    m: int
        Requested number of bits, rounded up to the next multiple of 32.
    k: int
        Number of bit positions derived per value.
    """

    _WORD: ClassVar[struct.Struct] = struct.Struct("!I")

    def __init__(self, m: int, k: int):
        n = max(0, (m + _WORD_BITS - 1) // _WORD_BITS)
        self._m = n * _WORD_BITS
        self._k = k
        self._words: list[int] = [0] * n
        self._lock = RWLock()
        logger.debug("allocated bloom filter m=%d k=%d", self._m, self._k)

    # -------------------------------------------------------
    # Construction helpers 🏗️
    # -------------------------------------------------------
    @classmethod
    def from_capacity(cls, n: int, fp: float = 0.01) -> "BloomFilter":
        """Create a filter sized to hold `n` items with ≈ `fp` false-positive rate."""
        m, k = estimate_parameters(n, fp)
        return cls(m, k)

    @classmethod
    def from_bytes(cls, blob: bytes, k: int) -> "BloomFilter":
        """Rebuild a filter from the output of :meth:`to_bytes`.

        `k` must match the exporting filter; this is not checked. A trailing
        partial word is dropped.
        """
        n = len(blob) // 4
        if len(blob) % 4:
            logger.warning(
                "dropping %d trailing byte(s) of a %d byte bloom filter export",
                len(blob) % 4,
                len(blob),
            )
        bf = cls(n * _WORD_BITS, k)
        bf._words = list(struct.unpack_from(f"!{n}I", blob))
        return bf

    # -------------------------------------------------------
    # Properties
    # -------------------------------------------------------
    @property
    def m(self) -> int:
        """Number of addressable bits."""
        return self._m

    @property
    def k(self) -> int:
        """Number of bit positions per value."""
        return self._k

    def __repr__(self) -> str:
        return f"BloomFilter(m={self._m}, k={self._k})"

    # -------------------------------------------------------
    # API
    # -------------------------------------------------------
    def add(self, value: Iterable[int]) -> None:
        """Add a byte string to the filter."""
        with self._lock.write_locked():
            for loc in locations(value, self._k, self._m):
                self._words[loc // _WORD_BITS] |= 1 << (loc % _WORD_BITS)

    def add_int(self, value: int) -> None:
        """Add the low 32 bits of an int, encoded big-endian."""
        self.add(self._WORD.pack(value & _MASK32))

    def test(self, value: Iterable[int]) -> bool:
        """Return False if `value` was definitely never added, True if it probably was."""
        with self._lock.read_locked():
            for loc in locations(value, self._k, self._m):
                if not self._words[loc // _WORD_BITS] & (1 << (loc % _WORD_BITS)):
                    return False
            return True

    def test_int(self, value: int) -> bool:
        """Test the low 32 bits of an int, encoded big-endian."""
        return self.test(self._WORD.pack(value & _MASK32))

    def __contains__(self, value: Union[int, Iterable[int]]) -> bool:
        if isinstance(value, int):
            return self.test_int(value)
        return self.test(value)

    # -------------------------------------------------------
    # Serialisation 📦
    # -------------------------------------------------------
    def to_bytes(self) -> bytes:
        """Export the words as concatenated 4-byte big-endian integers."""
        with self._lock.read_locked():
            return struct.pack(f"!{len(self._words)}I", *self._words)
