"""Tracker: the single actor that owns engine, log, planner and rest timer.

Every mutating call returns its result and writes the affected blobs into the
store before returning, so the caller only has to flush the store.
"""

from __future__ import annotations

import logging
from datetime import datetime
from uuid import UUID

from app.core.config import Settings, get_settings
from app.core.enums import ExerciseKind, WorkoutType
from app.schemas.history import WorkoutLogEntry
from app.schemas.plan import AccessoryExercise, TodaysPlan
from app.services.history import HistoryStore
from app.services.planner import WorkoutPlanner
from app.services.progression import ProgressionEngine, WorkingState
from app.services.records import RecordsCalculator
from app.services.rest_timer import RestTimer, rest_seconds_for
from app.services.storage import (
    MemoryBlobStore,
    load_accessories,
    load_snapshot,
    save_accessories,
    save_snapshot,
)

logger = logging.getLogger(__name__)


class Tracker:
    def __init__(
        self,
        store: MemoryBlobStore,
        settings: Settings | None = None,
        timer: RestTimer | None = None,
    ) -> None:
        self.store = store
        self.settings = settings or get_settings()
        self.timer = timer or RestTimer()
        self.engine = ProgressionEngine(load_snapshot(store))
        self.history = HistoryStore(self.engine, store, self.settings.tzinfo)
        self.history.load()
        self._accessories = {wt: load_accessories(store, wt) for wt in WorkoutType}
        self.planner = WorkoutPlanner(self.engine, self.history, self.accessories)

    # ---- reads ----

    @property
    def plan(self) -> TodaysPlan:
        return self.planner.plan

    @property
    def state(self) -> WorkingState:
        return self.engine.state

    @property
    def records(self) -> RecordsCalculator:
        return RecordsCalculator(self.history.entries)

    def accessories(self, workout_type: WorkoutType) -> list[AccessoryExercise]:
        return list(self._accessories[workout_type])

    # ---- mutations ----

    def _save_state(self) -> None:
        save_snapshot(self.store, self.engine.state)

    def toggle_set(self, kind: ExerciseKind, set_index: int) -> bool:
        """Tick/untick a set. Ticking starts the rest timer, unticking stops it."""
        completed = self.planner.toggle_set(kind, set_index)
        if completed:
            self.timer.start(
                rest_seconds_for(
                    set_index,
                    kind.sets,
                    self.settings.rest_seconds,
                    self.settings.final_set_rest_seconds,
                )
            )
        else:
            self.timer.stop()
        return completed

    def toggle_accessory_set(self, accessory_id: UUID, set_index: int) -> bool:
        return self.planner.toggle_accessory_set(accessory_id, set_index)

    def override_weight(self, kind: ExerciseKind, weight: float) -> WorkingState:
        """Manual edit; raises InvalidWeightError without touching state."""
        state = self.engine.manual_override(kind, weight)
        self.planner.update_planned_weight(kind)
        self._save_state()
        logger.info("Manual weight for %s set to %.2f", kind.value, state.exercises[kind].weight)
        return state

    def finish_session(self, performed_at: datetime | None = None) -> WorkoutLogEntry:
        self.timer.stop()
        entry = self.planner.finish_session(performed_at)
        self._save_state()
        return entry

    def delete_log(self, entry_id: UUID) -> bool:
        removed = self.history.remove_by_id(entry_id)
        if removed:
            self._save_state()
            self.planner.generate_plan()
        return removed

    def set_accessories(self, workout_type: WorkoutType, items: list[AccessoryExercise]) -> list[AccessoryExercise]:
        self._accessories[workout_type] = list(items)
        save_accessories(self.store, workout_type, self._accessories[workout_type])
        if self.planner.plan.workout_type is workout_type:
            self.planner.generate_plan()
        return self.accessories(workout_type)
