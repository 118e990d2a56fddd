"""Plate calculator: which plates go on each side of the bar."""

from __future__ import annotations

import math
from typing import NamedTuple

from app.core.constants import BAR_WEIGHT, PLATE_DENOMINATIONS


class PlateCount(NamedTuple):
    weight: float
    count: int


def calculate_plates(target_weight: float) -> list[PlateCount]:
    """
    Greedy breakdown of one side's load, heaviest plate first.

    Exact whenever the per-side load is a multiple of 1.25, which holds for
    every weight the progression engine produces. Anything left over is
    simply not loaded.
    """
    if target_weight <= BAR_WEIGHT:
        return []
    remaining = (target_weight - BAR_WEIGHT) / 2.0
    plates: list[PlateCount] = []
    for plate in PLATE_DENOMINATIONS:
        count = math.floor(remaining / plate)
        if count > 0:
            plates.append(PlateCount(plate, count))
            remaining -= count * plate
    return plates


def loaded_weight(plates: list[PlateCount]) -> float:
    """Total on the bar for a per-side breakdown."""
    return BAR_WEIGHT + 2 * sum(p.weight * p.count for p in plates)
