"""Workout planner: A/B alternation, today's plan and finishing a session."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from uuid import UUID

from app.core.constants import PLAN_EXERCISES
from app.core.enums import ExerciseKind, WorkoutType
from app.schemas.history import AccessoryCompletion, ExerciseResult, WorkoutLogEntry
from app.schemas.plan import AccessoryExercise, PlannedAccessory, PlannedExercise, TodaysPlan
from app.services.history import HistoryStore
from app.services.progression import ProgressionEngine

logger = logging.getLogger(__name__)


class PlanItemNotFoundError(LookupError):
    """Toggle or edit aimed at something that is not in today's plan."""


def next_workout_type(last: WorkoutType) -> WorkoutType:
    return WorkoutType.A if last is WorkoutType.B else WorkoutType.B


class WorkoutPlanner:
    def __init__(
        self,
        engine: ProgressionEngine,
        history: HistoryStore,
        accessories: Callable[[WorkoutType], list[AccessoryExercise]],
    ) -> None:
        self._engine = engine
        self._history = history
        self._accessories = accessories
        self.plan = self.generate_plan()

    @property
    def current_workout_type(self) -> WorkoutType:
        return next_workout_type(self._engine.last_workout_type)

    def generate_plan(self) -> TodaysPlan:
        """Fresh plan for the next session with every set unticked."""
        workout_type = self.current_workout_type
        self.plan = TodaysPlan(
            workout_type=workout_type,
            exercises=[
                PlannedExercise(
                    kind=kind,
                    weight=self._engine.weight_for(kind),
                    sets=kind.sets,
                    reps=kind.reps,
                    completed_sets=[False] * kind.sets,
                )
                for kind in PLAN_EXERCISES[workout_type]
            ],
            accessories=[
                PlannedAccessory(
                    id=item.id,
                    name=item.name,
                    sets=item.sets,
                    reps=item.reps,
                    completed_sets=[False] * item.sets,
                )
                for item in self._accessories(workout_type)
            ],
        )
        return self.plan

    def _planned(self, kind: ExerciseKind) -> PlannedExercise:
        for planned in self.plan.exercises:
            if planned.kind is kind:
                return planned
        raise PlanItemNotFoundError(f"{kind.value} is not in workout {self.plan.workout_type.value}")

    def toggle_set(self, kind: ExerciseKind, set_index: int) -> bool:
        planned = self._planned(kind)
        if not 0 <= set_index < planned.sets:
            raise PlanItemNotFoundError(f"{kind.value} has no set {set_index}")
        planned.completed_sets[set_index] = not planned.completed_sets[set_index]
        return planned.completed_sets[set_index]

    def toggle_accessory_set(self, accessory_id: UUID, set_index: int) -> bool:
        planned = next((a for a in self.plan.accessories if a.id == accessory_id), None)
        if planned is None:
            raise PlanItemNotFoundError(f"Accessory {accessory_id} is not in today's plan")
        if not 0 <= set_index < planned.sets:
            raise PlanItemNotFoundError(f"{planned.name} has no set {set_index}")
        planned.completed_sets[set_index] = not planned.completed_sets[set_index]
        return planned.completed_sets[set_index]

    def update_planned_weight(self, kind: ExerciseKind) -> None:
        """Pick up a manual weight change without clearing ticked sets."""
        for planned in self.plan.exercises:
            if planned.kind is kind:
                planned.weight = self._engine.weight_for(kind)

    def finish_session(self, performed_at: datetime | None = None) -> WorkoutLogEntry:
        """
        Grade each lift (success = every set ticked), progress the engine,
        log the session under the type just performed and plan the next one.
        """
        results = []
        for planned in self.plan.exercises:
            success = planned.is_success
            results.append(
                ExerciseResult(
                    kind=planned.kind,
                    weight=planned.weight,
                    sets=planned.kind.sets,
                    reps=planned.kind.reps,
                    success=success,
                )
            )
            self._engine.apply_result(planned.kind, planned.weight, success)

        completed_accessories = [
            AccessoryCompletion(id=a.id, name=a.label)
            for a in self.plan.accessories
            if a.is_complete
        ]
        fields = {"date": performed_at} if performed_at is not None else {}
        entry = WorkoutLogEntry(
            workout_type=self.plan.workout_type,
            exercises=tuple(results),
            accessory_work=tuple(completed_accessories),
            **fields,
        )
        self._history.append(entry)
        logger.info(
            "Finished workout %s: %s",
            entry.workout_type.value,
            ", ".join(f"{r.kind.value} {r.weight:g} {'ok' if r.success else 'missed'}" for r in results),
        )
        self.generate_plan()
        return entry
