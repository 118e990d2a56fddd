"""Health check endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_tracker
from app.db.session import get_db
from app.models.blob import KeyValueBlob
from app.services.tracker import Tracker

router = APIRouter()


@router.get("")
async def health():
    """Liveness."""
    return {"status": "ok"}


@router.get("/ready")
async def readiness(
    db: AsyncSession = Depends(get_db),
    tracker: Tracker = Depends(get_tracker),
):
    """Readiness: DB reachable, plus how much state is loaded in memory."""
    try:
        stored = (await db.execute(select(func.count()).select_from(KeyValueBlob))).scalar_one()
    except Exception as e:
        return JSONResponse(
            status_code=500,
            content={"status": "error", "database": str(e)},
        )
    return {
        "status": "ok",
        "database": "connected",
        "stored_values": stored,
        "log_entries": len(tracker.history.entries),
        "next_workout": tracker.plan.workout_type.value,
    }
