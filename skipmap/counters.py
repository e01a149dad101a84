"""Per-call step counters for empirical cost measurements.

A *step* is one forward move or one level drop during the descent, plus one
splice per level touched when a node is linked or unlinked.
"""
from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["StepCounter", "OPERATIONS"]

OPERATIONS = ("set", "get", "remove")


@dataclass
class StepCounter:
    """Steps of the most recent call per operation, plus running totals."""

    last: dict[str, int] = field(default_factory=lambda: dict.fromkeys(OPERATIONS, 0))
    total: dict[str, int] = field(default_factory=lambda: dict.fromkeys(OPERATIONS, 0))
    calls: dict[str, int] = field(default_factory=lambda: dict.fromkeys(OPERATIONS, 0))

    def record(self, op: str, steps: int) -> None:
        if op not in self.last:
            raise ValueError(f"Unknown operation: {op}")
        self.last[op] = steps
        self.total[op] += steps
        self.calls[op] += 1

    def mean(self, op: str) -> float:
        return self.total[op] / self.calls[op] if self.calls[op] else 0.0

    def reset(self) -> None:
        for op in OPERATIONS:
            self.last[op] = self.total[op] = self.calls[op] = 0

    def snapshot(self) -> dict[str, dict[str, int]]:
        return {op: {"last": self.last[op], "total": self.total[op], "calls": self.calls[op]} for op in OPERATIONS}
