"""Progression engine: working weight and failure streak per lift.

Rules (StrongLifts 5x5):
- all sets completed -> next session adds the lift's increment
- missed sets -> same weight next time
- third miss in a row -> deload by 10% (never below the empty bar)

The engine holds state in memory only; the tracker persists snapshots.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from app.core.constants import BAR_WEIGHT, DELOAD_FACTOR, FAILURES_BEFORE_DELOAD
from app.core.enums import ExerciseKind, WorkoutType
from app.services.rounding import floor_to_unit

logger = logging.getLogger(__name__)


class InvalidWeightError(ValueError):
    """Manual weight that is not a finite number at or above the bar."""


@dataclass(frozen=True)
class ExerciseState:
    weight: float
    failures: int = 0


def _default_exercises() -> dict[ExerciseKind, ExerciseState]:
    return {kind: ExerciseState(kind.starting_weight) for kind in ExerciseKind}


@dataclass
class WorkingState:
    exercises: dict[ExerciseKind, ExerciseState] = field(default_factory=_default_exercises)
    last_workout_type: WorkoutType = WorkoutType.B  # so the first plan is A

    def copy(self) -> WorkingState:
        return WorkingState(dict(self.exercises), self.last_workout_type)


def deload(weight: float, kind: ExerciseKind) -> float:
    return max(BAR_WEIGHT, floor_to_unit(weight * DELOAD_FACTOR, kind.unit))


class ProgressionEngine:
    def __init__(self, state: WorkingState | None = None) -> None:
        self._state = state.copy() if state is not None else WorkingState()

    @property
    def state(self) -> WorkingState:
        return self._state.copy()

    @property
    def last_workout_type(self) -> WorkoutType:
        return self._state.last_workout_type

    def weight_for(self, kind: ExerciseKind) -> float:
        return self._state.exercises[kind].weight

    def failures_for(self, kind: ExerciseKind) -> int:
        return self._state.exercises[kind].failures

    def apply_result(self, kind: ExerciseKind, attempted_weight: float, success: bool) -> WorkingState:
        """Apply one session's outcome for a lift and return the new state."""
        current = self._state.exercises[kind]
        if success:
            new = ExerciseState(floor_to_unit(attempted_weight + kind.increment, kind.unit), 0)
        else:
            failures = current.failures + 1
            if failures >= FAILURES_BEFORE_DELOAD:
                new = ExerciseState(deload(attempted_weight, kind), 0)
                logger.info("Deload %s: %.2f -> %.2f", kind.value, attempted_weight, new.weight)
            else:
                new = ExerciseState(max(BAR_WEIGHT, floor_to_unit(attempted_weight, kind.unit)), failures)
        self._state.exercises[kind] = new
        return self.state

    def manual_override(self, kind: ExerciseKind, new_weight: float) -> WorkingState:
        """
        Set a lift's weight directly (floored to its unit) and clear its failures.

        The override is not written to the history log: replaying the log after
        deleting an entry drops any override made after that entry.
        """
        if not math.isfinite(new_weight) or new_weight < BAR_WEIGHT:
            raise InvalidWeightError(f"Weight must be at least the bar ({BAR_WEIGHT} kg), got {new_weight}")
        self._state.exercises[kind] = ExerciseState(floor_to_unit(new_weight, kind.unit), 0)
        return self.state

    def mark_workout(self, workout_type: WorkoutType) -> None:
        """Record the workout type that was just performed."""
        self._state.last_workout_type = workout_type

    def reset_to_defaults(self) -> WorkingState:
        self._state = WorkingState()
        return self.state
