"""Accessory templates for workout A and B."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_tracker
from app.core.enums import WorkoutType
from app.db.session import get_db
from app.schemas.plan import AccessoryExercise, AccessoryTemplateRead
from app.services.blob_repository import flush_store
from app.services.tracker import Tracker

router = APIRouter()


@router.get("/{workout_type}", response_model=AccessoryTemplateRead)
async def get_accessories(workout_type: WorkoutType, tracker: Tracker = Depends(get_tracker)):
    return AccessoryTemplateRead(workout_type=workout_type, exercises=tracker.accessories(workout_type))


@router.put("/{workout_type}", response_model=AccessoryTemplateRead)
async def replace_accessories(
    workout_type: WorkoutType,
    payload: list[AccessoryExercise],
    db: AsyncSession = Depends(get_db),
    tracker: Tracker = Depends(get_tracker),
):
    """Replace the whole list. If it is today's workout type the plan is rebuilt (ticks are cleared)."""
    items = tracker.set_accessories(workout_type, payload)
    await flush_store(db, tracker.store)
    return AccessoryTemplateRead(workout_type=workout_type, exercises=items)
