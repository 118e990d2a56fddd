"""
Pytest configuration and fixtures.

Core tests run against an in-memory blob store; API tests get a fresh app
backed by a throwaway SQLite file per test.
"""
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.enums import ExerciseKind, WorkoutType
from app.main import create_application
from app.schemas.history import ExerciseResult, WorkoutLogEntry
from app.services.storage import MemoryBlobStore
from app.services.tracker import Tracker

BASE_DATE = datetime(2026, 3, 2, 18, 0, tzinfo=timezone.utc)


def make_result(kind: ExerciseKind, weight: float, success: bool = True) -> ExerciseResult:
    return ExerciseResult(kind=kind, weight=weight, sets=kind.sets, reps=kind.reps, success=success)


def make_entry(workout_type: WorkoutType, results, day_offset: int = 0) -> WorkoutLogEntry:
    return WorkoutLogEntry(
        workout_type=workout_type,
        date=BASE_DATE + timedelta(days=day_offset),
        exercises=tuple(results),
    )


def tick_all(planner_or_tracker) -> None:
    """Tick every working set in today's plan."""
    for planned in planner_or_tracker.plan.exercises:
        for i in range(planned.sets):
            if not planned.completed_sets[i]:
                planner_or_tracker.toggle_set(planned.kind, i)


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'tracker.db'}",
        auto_create_tables=True,
        log_level="WARNING",
    )


@pytest.fixture
def store():
    return MemoryBlobStore()


@pytest.fixture
def tracker(store, settings):
    return Tracker(store, settings=settings)


@pytest.fixture
def client(settings):
    app = create_application(settings)
    with TestClient(app) as c:
        yield c
