"""English names for small non-negative integers.

Used to generate human-readable demo values (``spell(21) == "twenty one"``).
"""
from __future__ import annotations

__all__ = ["spell"]

NUMBERS = (
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)

TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")


def spell(n: int, skip_zero: bool = False) -> str:
    """Spell *n* in words; returns ``""`` for zero when *skip_zero* is set.

    Numbers of a million and above are simply ``"really big"``.
    """
    if n < 0:
        raise ValueError(f"cannot spell negative number {n}")
    if n == 0 and skip_zero:
        return ""
    if n < 20:
        return NUMBERS[n]
    if n < 100:
        return f"{TENS[n // 10]} {spell(n % 10, True)}".strip()
    if n < 1000:
        return f"{NUMBERS[n // 100]} hundred {spell(n % 100, True)}".strip()
    if n < 1_000_000:
        return f"{spell(n // 1000)} thousand {spell(n % 1000, True)}".strip()
    return "really big"
