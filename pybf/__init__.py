"""pybf: a small thread-safe Bloom filter with a portable wire format.

The filter hashes values with a seeded FNV-1a variant and double hashing, so
its raw big-endian word export is bit-compatible with other implementations
of the same scheme. The high-level API is `pybf.BloomFilter`; the hashing,
position and sizing primitives are exposed for callers that need them.
"""

from __future__ import annotations

__all__ = [
    "BloomFilter",
    "RWLock",
    "SEED_A",
    "SEED_B",
    "dumps",
    "estimate_parameters",
    "fnv_1a",
    "loads",
    "locations",
]

from .bloom import BloomFilter
from .fnv import SEED_A, SEED_B, fnv_1a
from .locations import locations
from .params import estimate_parameters
from .rwlock import RWLock
from .snapshot import dumps, loads
