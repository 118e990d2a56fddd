"""Current working weights and failure streaks."""

from fastapi import APIRouter, Depends

from app.api.deps import get_tracker
from app.schemas.state import ExerciseStateRead, WorkingStateRead
from app.services.planner import next_workout_type
from app.services.tracker import Tracker

router = APIRouter()


@router.get("", response_model=WorkingStateRead)
async def get_state(tracker: Tracker = Depends(get_tracker)):
    state = tracker.state
    return WorkingStateRead(
        last_workout_type=state.last_workout_type,
        next_workout_type=next_workout_type(state.last_workout_type),
        exercises=[
            ExerciseStateRead(kind=kind, weight=ex.weight, failures=ex.failures)
            for kind, ex in state.exercises.items()
        ],
    )
