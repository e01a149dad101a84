"""Tunables of the skip map.

Defaults follow the classic layout: 16 levels comfortably index more than
65k entries at a 50 % promotion probability.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

__all__ = ["SkipMapConfig", "DEFAULT_MAX_HEIGHT", "DEFAULT_PROBABILITY"]

DEFAULT_MAX_HEIGHT = 16
DEFAULT_PROBABILITY = 0.5

_ENV_PREFIX = "SKIPMAP_"


@dataclass(frozen=True)
class SkipMapConfig:
    """Immutable skip-map configuration.

    Attributes
    ----------
    max_height:
        Upper bound on the height of any node (and of the map).
    probability:
        Chance that a node is promoted one more level, in ``(0, 1)``.
    seed:
        Seed of the map's private random generator; ``None`` seeds from the OS.
    """

    max_height: int = DEFAULT_MAX_HEIGHT
    probability: float = DEFAULT_PROBABILITY
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.max_height, bool) or not isinstance(self.max_height, int):
            raise ValueError(f"max_height must be an int, got {self.max_height!r}")
        if self.max_height < 1:
            raise ValueError(f"max_height must be >= 1, got {self.max_height}")
        if not 0.0 < self.probability < 1.0:
            raise ValueError(f"probability must lie in (0, 1), got {self.probability}")

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "SkipMapConfig":
        """Read ``SKIPMAP_MAX_HEIGHT``, ``SKIPMAP_PROBABILITY`` and ``SKIPMAP_SEED``."""
        env = os.environ if environ is None else environ
        seed = env.get(_ENV_PREFIX + "SEED")
        return cls(
            max_height=int(env.get(_ENV_PREFIX + "MAX_HEIGHT", DEFAULT_MAX_HEIGHT)),
            probability=float(env.get(_ENV_PREFIX + "PROBABILITY", DEFAULT_PROBABILITY)),
            seed=int(seed) if seed else None,
        )
