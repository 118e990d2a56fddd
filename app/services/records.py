"""Personal records and estimated 1RM derived from the workout log."""

from __future__ import annotations

from collections.abc import Sequence

from app.core.constants import EPLEY_REPS
from app.core.enums import ExerciseKind
from app.schemas.history import ProgressPoint, WorkoutLogEntry
from app.schemas.state import ExerciseRecordRead


def _epley_1rm(weight: float, reps: int) -> float:
    return weight * (1 + reps / 30)


class RecordsCalculator:
    def __init__(self, entries: Sequence[WorkoutLogEntry]) -> None:
        self._entries = entries

    def personal_record(self, kind: ExerciseKind) -> float | None:
        """Heaviest successful 5x5 weight for the lift, or None."""
        weights = [
            r.weight
            for entry in self._entries
            for r in entry.exercises
            if r.kind is kind and r.success
        ]
        return max(weights) if weights else None

    def estimated_one_rep_max(self, kind: ExerciseKind) -> float | None:
        pr = self.personal_record(kind)
        if pr is None:
            return None
        return _epley_1rm(pr, EPLEY_REPS)

    def progress_series(self, kind: ExerciseKind) -> list[ProgressPoint]:
        """Weight attempted per session that included the lift, oldest first."""
        points = []
        for entry in reversed(self._entries):
            result = entry.result_for(kind)
            if result is not None:
                points.append(ProgressPoint(date=entry.date, weight=result.weight))
        return points

    def summary(self) -> list[ExerciseRecordRead]:
        return [
            ExerciseRecordRead(
                kind=kind,
                personal_record=self.personal_record(kind),
                estimated_one_rep_max=self.estimated_one_rep_max(kind),
            )
            for kind in ExerciseKind
        ]
