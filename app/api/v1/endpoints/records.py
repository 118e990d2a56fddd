"""Records: personal records, estimated 1RM and progress series."""

from fastapi import APIRouter, Depends

from app.api.deps import get_tracker
from app.core.enums import ExerciseKind
from app.schemas.history import ProgressSeriesRead
from app.schemas.state import ExerciseRecordRead
from app.services.tracker import Tracker

router = APIRouter()


@router.get("", response_model=list[ExerciseRecordRead])
async def list_records(tracker: Tracker = Depends(get_tracker)):
    """
    For every lift: heaviest successful 5x5 weight and the Epley estimate
    weight * (1 + 5/30). Both null when the lift was never completed.
    """
    return tracker.records.summary()


@router.get("/progress", response_model=ProgressSeriesRead)
async def progress(kind: ExerciseKind, tracker: Tracker = Depends(get_tracker)):
    """Attempted weight per session for one lift, oldest first (for charts)."""
    return ProgressSeriesRead(kind=kind, points=tracker.records.progress_series(kind))
