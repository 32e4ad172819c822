"""Small numeric helpers shared by the weapon and mission code."""

from __future__ import annotations

import math


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp ``value`` into ``[lower, upper]``."""
    return max(lower, min(upper, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up.

    Python's ``round`` rounds halves to even, which would make 12.5 damage
    come out as 12.
    """
    return math.floor(value + 0.5)


__all__ = [
    "clamp",
    "round_half_up",
]
