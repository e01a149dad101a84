"""Ordered map backed by a probabilistic skip list.

Every node owns a ``forward`` list whose length is its height; ``forward[i]``
points at the next node that reaches level *i*.  Level 0 is the complete,
strictly ordered chain, higher levels are sparser shortcuts over it.

Complexities (average case):
    • search   – O(log n)
    • insert   – O(log n)
    • delete   – O(log n)
    • iterate  – O(n)

Keys are ordered by a three-way comparator supplied at construction time
(see :mod:`skipmap.comparators`).  The map is *not* thread-safe.
"""
from __future__ import annotations

import logging
import random
from collections.abc import Callable, Iterator
from typing import Generic, Optional, TypeVar, Union

from .comparators import Comparator, natural_order
from .config import SkipMapConfig
from .counters import StepCounter
from .errors import InvalidKeyError, KeyNotFoundError

__all__ = ["SkipMap", "random_height"]

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)


def random_height(rand: Callable[[], float], probability: float, max_height: int) -> int:
    """Draw a node height from a geometric distribution capped at *max_height*.

    ``P(height >= k) == probability ** (k - 1)`` below the cap.
    """
    lvl = 1
    while lvl < max_height and rand() < probability:
        lvl += 1
    return lvl


class _Head(Generic[K, V]):
    """Key-less anchor of every traversal."""

    __slots__ = ("forward",)

    def __init__(self, max_height: int):
        self.forward: list[Optional[_Node[K, V]]] = [None] * max_height

    def __repr__(self) -> str:  # pragma: no cover
        return "Head"


class _Node(Generic[K, V]):
    __slots__ = ("key", "value", "forward")

    def __init__(self, key: K, value: V, height: int):
        self.key = key
        self.value = value
        self.forward: list[Optional[_Node[K, V]]] = [None] * height

    @property
    def height(self) -> int:
        return len(self.forward)

    def __repr__(self) -> str:  # pragma: no cover
        return f"Node<{self.key!r}:{self.value!r}>"


_Link = Union[_Head[K, V], _Node[K, V]]


class SkipMap(Generic[K, V]):
    """Skip-list map from ordered keys to arbitrary values.

    Parameters
    ----------
    comparator:
        ``comparator(a, b)`` returns a negative number, zero or a positive
        number when *a* sorts before, equal to or after *b*.  Defaults to
        :func:`~skipmap.comparators.natural_order`.
    config:
        Height cap, promotion probability and optional seed.
    rand:
        Zero-argument callable returning floats in ``[0, 1)``; overrides the
        seeded generator built from *config*.  Handy for forcing heights in
        tests.
    counter:
        Optional :class:`~skipmap.counters.StepCounter` receiving the number
        of steps every operation takes.
    """

    def __init__(
        self,
        comparator: Optional[Comparator[K]] = None,
        *,
        config: Optional[SkipMapConfig] = None,
        rand: Optional[Callable[[], float]] = None,
        counter: Optional[StepCounter] = None,
    ):
        self._config = config or SkipMapConfig()
        self._compare: Comparator[K] = comparator or natural_order
        self._rand = rand or random.Random(self._config.seed).random
        self._counter = counter
        self._head: _Head[K, V] = _Head(self._config.max_height)
        self._height = 1
        self._size = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def height(self) -> int:
        """Number of levels currently in use (at least 1)."""
        return self._height

    @property
    def max_height(self) -> int:
        return self._config.max_height

    @property
    def probability(self) -> float:
        return self._config.probability

    @property
    def comparator(self) -> Comparator[K]:
        return self._compare

    @property
    def counter(self) -> Optional[StepCounter]:
        return self._counter

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    # ------------------------------------------------------------------
    # Query API
    # ------------------------------------------------------------------
    def get(self, key: K) -> V:
        """Return the value stored under *key*.

        Raises :class:`InvalidKeyError` for ``None`` and
        :class:`KeyNotFoundError` when the key is absent.
        """
        node = self._find(key, "get")
        if node is None:
            raise KeyNotFoundError(key)
        return node.value

    def contains_key(self, key: K) -> bool:
        return self._find(key, "get") is not None

    def __getitem__(self, key: K) -> V:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        if key is None:
            return False
        return self.contains_key(key)  # type: ignore[arg-type]

    # ------------------------------------------------------------------
    # Mutation API
    # ------------------------------------------------------------------
    def set(self, key: K, value: V) -> Optional[V]:
        """Insert or update *key*; return the previous value or ``None``."""
        self._check_key(key)
        update: list[_Link[K, V]] = [self._head] * self._config.max_height
        x, steps = self._descend(key, update)
        nxt = x.forward[0]
        if nxt is not None and self._compare(nxt.key, key) == 0:  # Update
            old = nxt.value
            nxt.value = value
            self._record("set", steps)
            return old
        lvl = random_height(self._rand, self._config.probability, self._config.max_height)
        assert lvl <= self._config.max_height, "node height exceeds max_height"
        if lvl > self._height:
            # update[] already holds the head for the newly activated levels.
            logger.debug("height grows %d -> %d (size=%d)", self._height, lvl, self._size + 1)
            self._height = lvl
        new_node: _Node[K, V] = _Node(key, value, lvl)
        for i in range(lvl):
            pred = update[i]
            new_node.forward[i] = pred.forward[i]
            pred.forward[i] = new_node
        self._size += 1
        self._record("set", steps + lvl)
        return None

    def remove(self, key: K) -> Optional[V]:
        """Delete *key*; return its value, or ``None`` when it was absent."""
        target = self._unlink(key)
        return None if target is None else target.value

    def __setitem__(self, key: K, value: V) -> None:
        self.set(key, value)

    def __delitem__(self, key: K) -> None:
        if self._unlink(key) is None:
            raise KeyNotFoundError(key)

    # ------------------------------------------------------------------
    # Iteration helpers (ordered)
    # ------------------------------------------------------------------
    def _nodes(self) -> Iterator[_Node[K, V]]:
        x = self._head.forward[0]
        while x is not None:
            yield x
            x = x.forward[0]

    def keys(self) -> Iterator[K]:
        for node in self._nodes():
            yield node.key

    def values(self) -> Iterator[V]:
        for node in self._nodes():
            yield node.value

    def items(self) -> Iterator[tuple[K, V]]:
        for node in self._nodes():
            yield node.key, node.value

    def for_each(self, action: Callable[[K, V], object]) -> None:
        """Call ``action(key, value)`` for every entry in key order."""
        for node in self._nodes():
            action(node.key, node.value)

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"SkipMap({{{body}}})"

    # ------------------------------------------------------------------
    # Structural views (read only, used by diagnostics)
    # ------------------------------------------------------------------
    def level_keys(self, level: int) -> Iterator[K]:
        """Yield the keys present on *level* in order."""
        if not 0 <= level < self._config.max_height:
            raise ValueError(f"level {level} outside [0, {self._config.max_height})")
        x = self._head.forward[level]
        while x is not None:
            yield x.key
            x = x.forward[level]

    def node_heights(self) -> Iterator[tuple[K, int]]:
        for node in self._nodes():
            yield node.key, node.height

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _check_key(key: object) -> None:
        if key is None:
            raise InvalidKeyError("key must not be None")

    def _descend(self, key: K, update: Optional[list[_Link[K, V]]] = None) -> tuple[_Link[K, V], int]:
        """Walk down from the top level to the last node whose key is < *key*.

        When *update* is given, ``update[i]`` receives the predecessor at
        level *i*.  Returns that bottom-level predecessor together with the
        number of steps (forward moves and level drops) it took.
        """
        x: _Link[K, V] = self._head
        steps = 0
        compare = self._compare
        for i in reversed(range(self._height)):
            while (nxt := x.forward[i]) is not None and compare(nxt.key, key) < 0:
                x = nxt
                steps += 1
            if update is not None:
                update[i] = x
            steps += 1
        return x, steps

    def _find(self, key: K, op: str) -> Optional[_Node[K, V]]:
        self._check_key(key)
        x, steps = self._descend(key)
        self._record(op, steps)
        nxt = x.forward[0]
        if nxt is not None and self._compare(nxt.key, key) == 0:
            return nxt
        return None

    def _unlink(self, key: K) -> Optional[_Node[K, V]]:
        """Remove the node holding *key* from every level; ``None`` if absent."""
        self._check_key(key)
        if self._head.forward[0] is None:
            self._record("remove", 0)
            return None
        update: list[_Link[K, V]] = [self._head] * self._height
        x, steps = self._descend(key, update)
        target = x.forward[0]
        if target is None or self._compare(target.key, key) != 0:
            self._record("remove", steps)
            return None
        h = target.height
        for i in range(h):
            update[i].forward[i] = target.forward[i]
        self._size -= 1
        if h == self._height:
            self._shrink()
        self._record("remove", steps + h)
        return target

    def _shrink(self) -> None:
        old = self._height
        while self._height > 1 and self._head.forward[self._height - 1] is None:
            self._height -= 1
        if self._height != old:
            logger.debug("height shrinks %d -> %d (size=%d)", old, self._height, self._size)

    def _record(self, op: str, steps: int) -> None:
        if self._counter is not None:
            self._counter.record(op, steps)
