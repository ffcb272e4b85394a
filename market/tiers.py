"""
Market value tiers: four bands derived from the live min/max of a collection.
Renderer-agnostic; callers decide how a tier is displayed.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional


class ValueTier(IntEnum):
    LOW = 1
    MEDIUM_LOW = 2
    MEDIUM_HIGH = 3
    HIGH = 4


@dataclass(frozen=True)
class ValueBands:
    minimum: float
    maximum: float

    @property
    def q1(self) -> float:
        return self.minimum + (self.maximum - self.minimum) / 4

    @property
    def q2(self) -> float:
        return self.minimum + (self.maximum - self.minimum) / 2

    @property
    def q3(self) -> float:
        return self.maximum - (self.maximum - self.minimum) / 4


def compute_bands(values: Iterable[float]) -> Optional[ValueBands]:
    """Return the bands for a set of market values, or None when there are none."""
    values = list(values)
    if not values:
        return None
    return ValueBands(minimum=min(values), maximum=max(values))


def value_tier(value: float, bands: ValueBands) -> ValueTier:
    """
    Classify a market value against the bands.

    Boundaries are inclusive on the upper side, so when every value is equal
    all of them land in LOW.
    """
    if value <= bands.q1:
        return ValueTier.LOW
    if value <= bands.q2:
        return ValueTier.MEDIUM_LOW
    if value <= bands.q3:
        return ValueTier.MEDIUM_HIGH
    return ValueTier.HIGH
