"""Self-describing snapshots of a Bloom filter.

The raw export of :meth:`BloomFilter.to_bytes` carries no hash count. A
snapshot wraps it together with *k* and *m* in a small *msgpack* envelope:

    (version, k, m, payload)

where *payload* is exactly the raw export, so the bits stay interoperable.
"""
from __future__ import annotations

import logging

import msgpack

from .bloom import BloomFilter

__all__ = ["dumps", "loads"]

logger = logging.getLogger(__name__)

_ENVELOPE_VERSION = 1


def dumps(bf: BloomFilter) -> bytes:
    """Serialise *bf* including its hash count."""
    payload = bf.to_bytes()
    blob = msgpack.packb((_ENVELOPE_VERSION, bf.k, len(payload) * 8, payload), use_bin_type=True)
    logger.debug("packed bloom snapshot m=%d k=%d (%d bytes)", len(payload) * 8, bf.k, len(blob))
    return blob


def loads(blob: bytes) -> BloomFilter:
    """Rebuild a filter from :func:`dumps` output.

    Raises
    ------
    ValueError
        If *blob* is not a well-formed snapshot.
    """
    try:
        envelope = msgpack.unpackb(blob, raw=False)
    except (msgpack.UnpackException, ValueError) as exc:
        raise ValueError("not a bloom filter snapshot") from exc
    if not isinstance(envelope, (list, tuple)) or len(envelope) != 4:
        raise ValueError("not a bloom filter snapshot")
    version, k, m, payload = envelope
    if version != _ENVELOPE_VERSION:
        raise ValueError(f"unsupported snapshot version: {version!r}")
    if not isinstance(k, int) or not isinstance(m, int) or not isinstance(payload, bytes):
        raise ValueError("malformed bloom filter snapshot")
    if isinstance(k, bool) or k < 0:
        raise ValueError(f"invalid hash count in snapshot: {k!r}")
    if m % 32:
        raise ValueError(f"snapshot bit count {m} is not a multiple of 32")
    if len(payload) * 8 != m:
        raise ValueError(f"snapshot declares {m} bits but carries {len(payload) * 8}")
    logger.debug("unpacked bloom snapshot m=%d k=%d", m, k)
    return BloomFilter.from_bytes(payload, k)
