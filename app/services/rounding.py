"""Rounding helpers shared by the progression engine and the calculators.

Working weights always round *down* to the exercise's unit; the warm-up ramp
rounds to the *nearest* plate step. Both are total for any real input.
"""

from __future__ import annotations

import math


def floor_to_unit(value: float, unit: float) -> float:
    """Largest multiple of ``unit`` that is <= ``value``."""
    return math.floor(value / unit) * unit


def round_to_nearest(value: float, unit: float) -> float:
    """Nearest multiple of ``unit``; exact halves go up (round-half-up)."""
    return math.floor(value / unit + 0.5) * unit


def clamp_min(value: float, minimum: float) -> float:
    return minimum if value < minimum else value
