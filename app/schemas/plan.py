"""Today's plan, accessory templates and plan-action payloads."""

from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from app.core.enums import ExerciseKind, WorkoutType
from app.schemas.history import WorkoutLogEntry


class AccessoryExercise(BaseModel):
    """Accessory template item, e.g. Dips 3 x "8-12"."""

    id: UUID = Field(default_factory=uuid4)
    name: str = Field(..., min_length=1, max_length=255)
    sets: int = Field(default=3, ge=1, le=10)
    reps: str = Field(default="10", min_length=1, max_length=20)

    @property
    def label(self) -> str:
        return f"{self.name} {self.sets}x{self.reps}"


class PlannedExercise(BaseModel):
    kind: ExerciseKind
    weight: float
    sets: int
    reps: int
    completed_sets: list[bool]

    @property
    def is_success(self) -> bool:
        return all(self.completed_sets)


class PlannedAccessory(BaseModel):
    id: UUID
    name: str
    sets: int
    reps: str
    completed_sets: list[bool]

    @property
    def is_complete(self) -> bool:
        return all(self.completed_sets)

    @property
    def label(self) -> str:
        return f"{self.name} {self.sets}x{self.reps}"


class TodaysPlan(BaseModel):
    workout_type: WorkoutType
    exercises: list[PlannedExercise] = []
    accessories: list[PlannedAccessory] = []

    @property
    def all_sets_completed(self) -> bool:
        return all(e.is_success for e in self.exercises)


class ToggleSetRequest(BaseModel):
    kind: ExerciseKind
    set_index: int = Field(ge=0)


class ToggleAccessoryRequest(BaseModel):
    accessory_id: UUID
    set_index: int = Field(ge=0)


class ToggleSetResponse(BaseModel):
    completed: bool
    rest_timer_seconds: int | None = None  # remaining rest, when the timer is running
    plan: TodaysPlan


class WeightUpdateRequest(BaseModel):
    kind: ExerciseKind
    weight: float


class AccessoryTemplateRead(BaseModel):
    workout_type: WorkoutType
    exercises: list[AccessoryExercise] = []


class FinishSessionResponse(BaseModel):
    entry: WorkoutLogEntry
    next_plan: TodaysPlan
