"""Workout history: list, lookup by day, delete (with replay)."""

from __future__ import annotations

import uuid
from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_tracker
from app.db.session import get_db
from app.schemas.history import HistoryDayRead, WorkoutLogEntry
from app.services.blob_repository import flush_store
from app.services.tracker import Tracker

router = APIRouter()


@router.get("", response_model=list[WorkoutLogEntry])
async def list_history(
    skip: int = 0,
    limit: int = 50,
    tracker: Tracker = Depends(get_tracker),
):
    """Logged workouts, newest first."""
    return list(tracker.history.entries[skip : skip + limit])


@router.get("/by-date", response_model=HistoryDayRead)
async def history_for_day(day: date, tracker: Tracker = Depends(get_tracker)):
    """The workout logged on a calendar day in the configured timezone; entry is null when there is none."""
    return HistoryDayRead(day=day, entry=tracker.history.entry_for(day))


@router.get("/{entry_id}", response_model=WorkoutLogEntry)
async def get_entry(entry_id: uuid.UUID, tracker: Tracker = Depends(get_tracker)):
    entry = tracker.history.get(entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Workout log not found")
    return entry


@router.delete("/{entry_id}", status_code=204)
async def delete_entry(
    entry_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    tracker: Tracker = Depends(get_tracker),
):
    """
    Delete a logged workout and rebuild current weights by replaying the rest
    of the log. Manual weight edits made after the deleted workout are lost.
    Deleting an unknown id does nothing.
    """
    if tracker.delete_log(entry_id):
        await flush_store(db, tracker.store)
    return None
