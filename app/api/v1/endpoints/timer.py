"""Rest timer status and control. Remaining time is recomputed from the deadline on every read."""

from fastapi import APIRouter, Depends

from app.api.deps import get_tracker
from app.schemas.tools import TimerStartRequest, TimerStatus
from app.services.rest_timer import RestTimer
from app.services.tracker import Tracker

router = APIRouter()


def _status(timer: RestTimer) -> TimerStatus:
    remaining = timer.resume()
    return TimerStatus(
        is_active=timer.is_active,
        remaining_seconds=remaining,
        initial_duration=timer.initial_duration,
        progress=timer.progress(),
    )


@router.get("", response_model=TimerStatus)
async def timer_status(tracker: Tracker = Depends(get_tracker)):
    return _status(tracker.timer)


@router.post("/start", response_model=TimerStatus)
async def start_timer(payload: TimerStartRequest, tracker: Tracker = Depends(get_tracker)):
    tracker.timer.start(payload.duration_seconds)
    return _status(tracker.timer)


@router.post("/stop", response_model=TimerStatus)
async def stop_timer(tracker: Tracker = Depends(get_tracker)):
    tracker.timer.stop()
    return _status(tracker.timer)
