"""Application constants."""

from app.core.enums import ExerciseKind, WorkoutType

# Barbell
BAR_WEIGHT = 20.0
PLATE_DENOMINATIONS = (20.0, 15.0, 10.0, 5.0, 2.5, 1.25)  # per side, heaviest first

# Progression
FAILURES_BEFORE_DELOAD = 3
DELOAD_FACTOR = 0.9

# Warm-up ramp (fraction of work weight, reps label)
WARMUP_RAMP = ((0.0, "5"), (0.0, "5"), (0.40, "5"), (0.60, "3"), (0.80, "2"))
WARMUP_ROUNDING_UNIT = 2.5

# Epley formula fixed at the 5-rep working sets
EPLEY_REPS = 5

# Session layout
PLAN_EXERCISES = {
    WorkoutType.A: (ExerciseKind.SQUAT, ExerciseKind.BENCH_PRESS, ExerciseKind.BARBELL_ROW),
    WorkoutType.B: (ExerciseKind.SQUAT, ExerciseKind.OVERHEAD_PRESS, ExerciseKind.DEADLIFT),
}

# Rest timer defaults (seconds)
REST_SECONDS = 180
FINAL_SET_REST_SECONDS = 300

# Blob store keys
HISTORY_KEY = "workoutHistory"
LAST_WORKOUT_TYPE_KEY = "lastWorkoutType"
WEIGHT_KEY_PREFIX = "weight."
FAILURES_KEY_PREFIX = "failures."
ACCESSORIES_KEY_PREFIX = "accessories."
