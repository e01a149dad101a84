"""In-memory snapshots of a skip map encoded with *msgpack*.

The snapshot is a msgpack array of ``[key, value]`` pairs in key order.  It
only goes through the public map API and is meant for tooling (shipping a
map to another process, diffing two maps); it carries no durability promise.

Keys and values must be msgpack-serialisable.  Tuples travel as an ext type
so that they come back as tuples (tuple keys stay hashable and keep their
ordering); lists come back as lists and maps may use any key type.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import msgpack

from .comparators import Comparator
from .config import SkipMapConfig
from .skiplist import SkipMap

__all__ = ["pack", "unpack"]

logger = logging.getLogger(__name__)

_TUPLE_EXT = 1


def _default(obj: Any) -> Any:
    if isinstance(obj, tuple):
        return msgpack.ExtType(_TUPLE_EXT, _packb(list(obj)))
    # strict_types sends subclasses (IntEnum, OrderedDict, ...) here too.
    if isinstance(obj, (bytearray, memoryview)):
        return bytes(obj)
    for base in (int, float, str, bytes, list, dict):
        if isinstance(obj, base):
            return base(obj)
    raise TypeError(f"Cannot serialise {type(obj).__name__}")


def _ext_hook(code: int, data: bytes) -> Any:
    if code == _TUPLE_EXT:
        return tuple(_unpackb(data))
    return msgpack.ExtType(code, data)


def _packb(obj: Any) -> bytes:
    return msgpack.packb(obj, use_bin_type=True, strict_types=True, default=_default)


def _unpackb(blob: bytes) -> Any:
    return msgpack.unpackb(blob, raw=False, strict_map_key=False, ext_hook=_ext_hook)


def pack(skipmap: SkipMap[Any, Any]) -> bytes:
    """Encode all entries of *skipmap* in ascending key order."""
    return _packb([[k, v] for k, v in skipmap.items()])


def unpack(
    blob: bytes,
    comparator: Optional[Comparator[Any]] = None,
    config: Optional[SkipMapConfig] = None,
) -> SkipMap[Any, Any]:
    """Rebuild a map from :func:`pack` output.

    Raises ``ValueError`` when *blob* is not a list of pairs.
    """
    try:
        entries = _unpackb(blob)
    except ValueError as exc:  # msgpack's unpack errors all derive from it
        raise ValueError(f"Malformed snapshot: {exc}") from exc
    if not isinstance(entries, list):
        raise ValueError(f"Malformed snapshot: expected array, got {type(entries).__name__}")
    skipmap: SkipMap[Any, Any] = SkipMap(comparator, config=config)
    for entry in entries:
        if not isinstance(entry, list) or len(entry) != 2:
            raise ValueError(f"Malformed snapshot entry: {entry!r}")
        skipmap.set(entry[0], entry[1])
    logger.debug("unpacked %d entries (height=%d)", len(skipmap), skipmap.height)
    return skipmap
