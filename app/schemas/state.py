"""Working state and records schemas."""

from pydantic import BaseModel

from app.core.enums import ExerciseKind, WorkoutType


class ExerciseStateRead(BaseModel):
    kind: ExerciseKind
    weight: float
    failures: int


class WorkingStateRead(BaseModel):
    last_workout_type: WorkoutType
    next_workout_type: WorkoutType
    exercises: list[ExerciseStateRead]


class ExerciseRecordRead(BaseModel):
    """PR (heaviest successful 5x5 weight) and Epley estimate; null without data."""

    kind: ExerciseKind
    personal_record: float | None = None
    estimated_one_rep_max: float | None = None
