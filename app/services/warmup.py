"""Warm-up calculator: work weight -> ramp of lighter sets before the 5x5."""

from __future__ import annotations

from typing import NamedTuple

from app.core.constants import BAR_WEIGHT, WARMUP_RAMP, WARMUP_ROUNDING_UNIT
from app.services.rounding import clamp_min, round_to_nearest


class WarmupSet(NamedTuple):
    weight: float
    reps: str


def calculate_warmup_sets(work_weight: float) -> list[WarmupSet]:
    """
    Walk the fixed percentage ramp (empty bar twice, then 40/60/80%).
    Each step is clamped to the bar and rounded to the nearest 2.5; a step
    that lands on the same weight as the previous one is dropped, so the
    first label for a weight wins.
    """
    if work_weight <= BAR_WEIGHT:
        return [WarmupSet(BAR_WEIGHT, "5"), WarmupSet(BAR_WEIGHT, "5")]

    sets: list[WarmupSet] = []
    for fraction, reps in WARMUP_RAMP:
        weight = clamp_min(work_weight * fraction, BAR_WEIGHT)
        weight = round_to_nearest(weight, WARMUP_ROUNDING_UNIT)
        if not sets or sets[-1].weight != weight:
            sets.append(WarmupSet(weight, reps))
    return sets
