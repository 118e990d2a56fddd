"""Shared enums for the progression engine and API."""

from enum import Enum


class WorkoutType(str, Enum):
    """The two alternating 5x5 sessions."""

    A = "A"
    B = "B"


class ExerciseKind(str, Enum):
    """Main barbell lifts. Values are the display names stored in the history log."""

    SQUAT = "Squat"
    BENCH_PRESS = "Bench Press"
    BARBELL_ROW = "Barbell Row"
    OVERHEAD_PRESS = "Overhead Press"
    DEADLIFT = "Deadlift"

    @property
    def slug(self) -> str:
        """Storage key fragment, e.g. bench_press."""
        return self.name.lower()

    @property
    def sets(self) -> int:
        return 1 if self is ExerciseKind.DEADLIFT else 5

    @property
    def reps(self) -> int:
        return 5

    @property
    def unit(self) -> float:
        """Rounding unit for the working weight."""
        return 5.0 if self is ExerciseKind.DEADLIFT else 2.5

    @property
    def increment(self) -> float:
        """Weight added after a fully successful session."""
        return 5.0 if self is ExerciseKind.DEADLIFT else 2.5

    @property
    def starting_weight(self) -> float:
        return _STARTING_WEIGHTS[self]


_STARTING_WEIGHTS = {
    ExerciseKind.SQUAT: 20.0,
    ExerciseKind.BENCH_PRESS: 20.0,
    ExerciseKind.BARBELL_ROW: 30.0,
    ExerciseKind.OVERHEAD_PRESS: 20.0,
    ExerciseKind.DEADLIFT: 40.0,
}
