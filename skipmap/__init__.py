"""skipmap: an ordered in-memory map backed by a skip list.

The package exposes the map via `skipmap.SkipMap` and keeps the diagnostic
helpers (dump, step counters, numerals, msgpack snapshots) in their own
modules so that the core stays small.
"""

from __future__ import annotations

__all__ = [
    "SkipMap",
    "SkipMapConfig",
    "StepCounter",
    "SkipMapError",
    "InvalidKeyError",
    "KeyNotFoundError",
]

from .config import SkipMapConfig
from .counters import StepCounter
from .errors import InvalidKeyError, KeyNotFoundError, SkipMapError
from .skiplist import SkipMap
