"""Workout log schemas: the persisted history entries and their API views.

Field aliases follow the stored blob layout (``workoutType``, ``accessoryWork``,
exercise ``name``); Python code uses the snake_case names.
"""

import logging
from datetime import date, datetime, timezone
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from app.core.enums import ExerciseKind, WorkoutType

logger = logging.getLogger(__name__)

_LIFT_NAMES = frozenset(kind.value for kind in ExerciseKind)


class ExerciseResult(BaseModel):
    """Outcome of one main lift in a finished session."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: UUID = Field(default_factory=uuid4)
    kind: ExerciseKind = Field(alias="name")
    weight: float
    sets: int
    reps: int
    success: bool


class AccessoryCompletion(BaseModel):
    """Accessory work whose sets were all completed, e.g. "Dips 3x8-12"."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    name: str


class WorkoutLogEntry(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: UUID = Field(default_factory=uuid4)
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    workout_type: WorkoutType = Field(alias="workoutType")
    exercises: tuple[ExerciseResult, ...] = ()
    accessory_work: tuple[AccessoryCompletion, ...] = Field(default=(), alias="accessoryWork")

    @field_validator("exercises", mode="before")
    @classmethod
    def _skip_unknown_lifts(cls, value: Any) -> Any:
        """Drop stored results for lifts this app does not know; keep the rest of the entry."""
        if not isinstance(value, (list, tuple)):
            return value
        kept = []
        for item in value:
            name = item.get("name", item.get("kind")) if isinstance(item, dict) else None
            if isinstance(name, str) and name not in _LIFT_NAMES:
                logger.warning("Skipping logged result for unknown lift %r", name)
                continue
            kept.append(item)
        return kept

    def result_for(self, kind: ExerciseKind) -> ExerciseResult | None:
        """First result for this lift in the entry, if any."""
        return next((r for r in self.exercises if r.kind is kind), None)


HistoryLogAdapter = TypeAdapter(list[WorkoutLogEntry])


class ProgressPoint(BaseModel):
    date: datetime
    weight: float


class ProgressSeriesRead(BaseModel):
    kind: ExerciseKind
    points: list[ProgressPoint] = []


class HistoryDayRead(BaseModel):
    """Entry for one calendar day (null when nothing was logged)."""

    day: date
    entry: WorkoutLogEntry | None = None
