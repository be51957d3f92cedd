"""Fractional tick counters that drive the simulation clock."""

from __future__ import annotations

import math
from dataclasses import dataclass

FIXED_HZ = 5.0
"""How many fixed simulation steps run per second."""


def _round_milli(number: float) -> float:
    """Round to three decimals, halves away from zero."""
    scaled = number * 1000.0
    return math.copysign(math.floor(abs(scaled) + 0.5), scaled) / 1000.0


@dataclass
class TickRate:
    """How many real seconds make up one simulation tick."""

    seconds_per_tick: float = 0.2

    def ticks(self, seconds: float) -> float:
        """The number of ticks that the given number of seconds is worth."""
        return seconds / self.seconds_per_tick


class Ticker:
    """Counts ticks at a fraction of the base rate and reports whole steps."""

    def __init__(self, scale: int) -> None:
        if scale <= 0:
            raise ValueError("scale should never be 0")
        self.scale = float(scale)
        self.fractional = 0.0
        self.whole = 0
        self.just_ticked = False
        self.delta = 0.0

    def advance(self, delta_ticks: float) -> None:
        """Add base ticks; just_ticked becomes true when a whole step passes."""
        self.delta = _round_milli(delta_ticks / self.scale)
        self.fractional = _round_milli(self.fractional + self.delta)

        new_whole = max(0, math.floor(self.fractional))
        self.just_ticked = self.whole != new_whole
        self.whole = new_whole

    def __repr__(self) -> str:
        return (
            f"Ticker(scale={self.scale}, fractional={self.fractional}, "
            f"whole={self.whole}, just_ticked={self.just_ticked})"
        )