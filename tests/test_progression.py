"""
Tests for the progression engine: increments, failure streaks, deloads and
manual overrides.
"""
import math

import pytest

from app.core.enums import ExerciseKind, WorkoutType
from app.services.progression import (
    ExerciseState,
    InvalidWeightError,
    ProgressionEngine,
    WorkingState,
    deload,
)


@pytest.fixture
def engine():
    return ProgressionEngine()


class TestDefaults:
    def test_starting_weights(self, engine):
        state = engine.state
        assert {k: s.weight for k, s in state.exercises.items()} == {
            ExerciseKind.SQUAT: 20.0,
            ExerciseKind.BENCH_PRESS: 20.0,
            ExerciseKind.BARBELL_ROW: 30.0,
            ExerciseKind.OVERHEAD_PRESS: 20.0,
            ExerciseKind.DEADLIFT: 40.0,
        }
        assert all(s.failures == 0 for s in state.exercises.values())
        assert state.last_workout_type is WorkoutType.B

    def test_reset_to_defaults_discards_progress(self, engine):
        engine.apply_result(ExerciseKind.SQUAT, 20.0, True)
        engine.apply_result(ExerciseKind.BENCH_PRESS, 20.0, False)
        engine.mark_workout(WorkoutType.A)
        assert engine.reset_to_defaults() == WorkingState()

    def test_state_is_a_copy(self, engine):
        state = engine.state
        state.exercises[ExerciseKind.SQUAT] = ExerciseState(100.0)
        assert engine.weight_for(ExerciseKind.SQUAT) == 20.0


class TestSuccess:
    @pytest.mark.parametrize(
        "kind,attempted,expected",
        [
            (ExerciseKind.SQUAT, 20.0, 22.5),
            (ExerciseKind.BENCH_PRESS, 47.5, 50.0),
            (ExerciseKind.BARBELL_ROW, 30.0, 32.5),
            (ExerciseKind.OVERHEAD_PRESS, 35.0, 37.5),
            (ExerciseKind.DEADLIFT, 40.0, 45.0),
            (ExerciseKind.DEADLIFT, 100.0, 105.0),
        ],
    )
    def test_success_adds_increment(self, engine, kind, attempted, expected):
        state = engine.apply_result(kind, attempted, True)
        assert state.exercises[kind] == ExerciseState(expected, 0)

    def test_success_is_based_on_attempted_weight(self, engine):
        state = engine.apply_result(ExerciseKind.SQUAT, 50.0, True)
        assert state.exercises[ExerciseKind.SQUAT].weight == 52.5

    def test_success_clears_failure_streak(self, engine):
        engine.apply_result(ExerciseKind.SQUAT, 20.0, False)
        engine.apply_result(ExerciseKind.SQUAT, 20.0, False)
        state = engine.apply_result(ExerciseKind.SQUAT, 20.0, True)
        assert state.exercises[ExerciseKind.SQUAT] == ExerciseState(22.5, 0)


class TestFailureAndDeload:
    def test_one_and_two_failures_keep_weight(self, engine):
        engine.manual_override(ExerciseKind.SQUAT, 60.0)
        state = engine.apply_result(ExerciseKind.SQUAT, 60.0, False)
        assert state.exercises[ExerciseKind.SQUAT] == ExerciseState(60.0, 1)
        state = engine.apply_result(ExerciseKind.SQUAT, 60.0, False)
        assert state.exercises[ExerciseKind.SQUAT] == ExerciseState(60.0, 2)

    def test_third_failure_deloads_ten_percent(self, engine):
        engine.manual_override(ExerciseKind.SQUAT, 60.0)
        for _ in range(3):
            state = engine.apply_result(ExerciseKind.SQUAT, 60.0, False)
        # 60 * 0.9 = 54 -> floored to 52.5
        assert state.exercises[ExerciseKind.SQUAT] == ExerciseState(52.5, 0)

    def test_deadlift_deload_uses_five_kilo_unit(self, engine):
        engine.manual_override(ExerciseKind.DEADLIFT, 100.0)
        for _ in range(3):
            state = engine.apply_result(ExerciseKind.DEADLIFT, 100.0, False)
        assert state.exercises[ExerciseKind.DEADLIFT] == ExerciseState(90.0, 0)

    def test_deload_never_goes_below_bar(self, engine):
        for _ in range(3):
            state = engine.apply_result(ExerciseKind.BENCH_PRESS, 20.0, False)
        assert state.exercises[ExerciseKind.BENCH_PRESS] == ExerciseState(20.0, 0)

    @pytest.mark.parametrize(
        "weight,kind,expected",
        [
            (60.0, ExerciseKind.SQUAT, 52.5),
            (100.0, ExerciseKind.SQUAT, 90.0),
            (57.5, ExerciseKind.BENCH_PRESS, 50.0),
            (125.0, ExerciseKind.DEADLIFT, 110.0),
            (20.0, ExerciseKind.OVERHEAD_PRESS, 20.0),
            (22.5, ExerciseKind.OVERHEAD_PRESS, 20.0),
        ],
    )
    def test_deload_formula(self, weight, kind, expected):
        assert deload(weight, kind) == expected

    def test_failures_stay_within_range(self, engine):
        for _ in range(10):
            state = engine.apply_result(ExerciseKind.BARBELL_ROW, 30.0, False)
            assert 0 <= state.exercises[ExerciseKind.BARBELL_ROW].failures <= 2

    def test_failures_are_tracked_per_lift(self, engine):
        engine.apply_result(ExerciseKind.SQUAT, 20.0, False)
        engine.apply_result(ExerciseKind.SQUAT, 20.0, False)
        state = engine.apply_result(ExerciseKind.BENCH_PRESS, 20.0, False)
        assert state.exercises[ExerciseKind.SQUAT].failures == 2
        assert state.exercises[ExerciseKind.BENCH_PRESS].failures == 1

    def test_miss_keeps_the_attempted_weight(self, engine):
        # a logged miss at a weight the engine no longer holds, as during replay
        state = engine.apply_result(ExerciseKind.SQUAT, 100.0, False)
        assert state.exercises[ExerciseKind.SQUAT] == ExerciseState(100.0, 1)
        state = engine.apply_result(ExerciseKind.DEADLIFT, 87.0, False)
        assert state.exercises[ExerciseKind.DEADLIFT] == ExerciseState(85.0, 1)


class TestManualOverride:
    def test_override_floors_to_unit_and_clears_failures(self, engine):
        engine.apply_result(ExerciseKind.SQUAT, 20.0, False)
        state = engine.manual_override(ExerciseKind.SQUAT, 62.4)
        assert state.exercises[ExerciseKind.SQUAT] == ExerciseState(60.0, 0)

    def test_deadlift_override_floors_to_five(self, engine):
        state = engine.manual_override(ExerciseKind.DEADLIFT, 87.0)
        assert state.exercises[ExerciseKind.DEADLIFT].weight == 85.0

    @pytest.mark.parametrize("bad", [-10.0, 0.0, 19.9, math.nan, math.inf])
    def test_rejects_weights_below_bar_or_not_finite(self, engine, bad):
        engine.apply_result(ExerciseKind.SQUAT, 20.0, False)
        before = engine.state
        with pytest.raises(InvalidWeightError):
            engine.manual_override(ExerciseKind.SQUAT, bad)
        assert engine.state == before
