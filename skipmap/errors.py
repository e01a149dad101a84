"""Exceptions raised by :class:`skipmap.SkipMap`."""
from __future__ import annotations

__all__ = ["SkipMapError", "InvalidKeyError", "KeyNotFoundError"]


class SkipMapError(Exception):
    """Base class of all skip-map errors."""


class InvalidKeyError(SkipMapError, TypeError):
    """A keyed operation received ``None`` as key."""


class KeyNotFoundError(SkipMapError, KeyError):
    """Lookup of a key that is not stored in the map."""
