"""Today's plan: set toggles, manual weight edits and finishing the session."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_tracker
from app.db.session import get_db
from app.schemas.plan import (
    FinishSessionResponse,
    TodaysPlan,
    ToggleAccessoryRequest,
    ToggleSetRequest,
    ToggleSetResponse,
    WeightUpdateRequest,
)
from app.services.blob_repository import flush_store
from app.services.planner import PlanItemNotFoundError
from app.services.progression import InvalidWeightError
from app.services.tracker import Tracker

router = APIRouter()


@router.get("", response_model=TodaysPlan)
async def get_plan(tracker: Tracker = Depends(get_tracker)):
    """Next session (A or B) with current weights and which sets are ticked."""
    return tracker.plan


@router.post("/sets/toggle", response_model=ToggleSetResponse)
async def toggle_set(
    payload: ToggleSetRequest,
    tracker: Tracker = Depends(get_tracker),
):
    """Tick or untick one working set. Ticking starts the rest timer (3 min, 5 min after the last set)."""
    try:
        completed = tracker.toggle_set(payload.kind, payload.set_index)
    except PlanItemNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return ToggleSetResponse(
        completed=completed,
        rest_timer_seconds=tracker.timer.remaining_seconds() if tracker.timer.is_active else None,
        plan=tracker.plan,
    )


@router.post("/accessories/toggle", response_model=ToggleSetResponse)
async def toggle_accessory_set(
    payload: ToggleAccessoryRequest,
    tracker: Tracker = Depends(get_tracker),
):
    try:
        completed = tracker.toggle_accessory_set(payload.accessory_id, payload.set_index)
    except PlanItemNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return ToggleSetResponse(completed=completed, plan=tracker.plan)


@router.put("/weight", response_model=TodaysPlan)
async def update_weight(
    payload: WeightUpdateRequest,
    db: AsyncSession = Depends(get_db),
    tracker: Tracker = Depends(get_tracker),
):
    """
    Manually set a lift's working weight (floored to 2.5 kg, 5 kg for deadlift)
    and clear its failure streak. Not recorded in the history log.
    """
    try:
        tracker.override_weight(payload.kind, payload.weight)
    except InvalidWeightError as e:
        raise HTTPException(status_code=422, detail=str(e))
    await flush_store(db, tracker.store)
    return tracker.plan


@router.post("/finish", response_model=FinishSessionResponse)
async def finish_session(
    performed_at: datetime | None = Body(default=None, embed=True),
    db: AsyncSession = Depends(get_db),
    tracker: Tracker = Depends(get_tracker),
):
    """
    Finish the session: lifts with every set ticked go up next time, missed
    lifts stay (third miss in a row deloads 10%). Logs the workout and returns
    the next session's plan.
    """
    entry = tracker.finish_session(performed_at)
    await flush_store(db, tracker.store)
    return FinishSessionResponse(entry=entry, next_plan=tracker.plan)
