"""QoL tools: warm-up ramp and plate calculator (pure logic, no DB)."""

from fastapi import APIRouter, Query

from app.core.constants import BAR_WEIGHT
from app.schemas.tools import (
    PlateCalculatorResponse,
    PlateRead,
    WarmupResponse,
    WarmupSetRead,
)
from app.services.plates import calculate_plates, loaded_weight
from app.services.warmup import calculate_warmup_sets

router = APIRouter()


@router.get("/warmup", response_model=WarmupResponse)
async def warmup(work_weight: float = Query(ge=0, description="Working weight in kg")):
    """
    Warm-up sets before the working sets: empty bar twice, then 40/60/80%
    rounded to the nearest 2.5 kg. Repeated weights are collapsed.
    """
    sets = calculate_warmup_sets(work_weight)
    return WarmupResponse(
        work_weight=work_weight,
        sets=[WarmupSetRead(weight=s.weight, reps=s.reps) for s in sets],
    )


@router.get("/plate-calculator", response_model=PlateCalculatorResponse)
async def plate_calculator(target_weight: float = Query(ge=0, description="Total weight on the bar (kg)")):
    """
    Returns which plates to put on each side of a 20 kg bar to reach the target weight.
    """
    plates = calculate_plates(target_weight)
    return PlateCalculatorResponse(
        target_weight=target_weight,
        bar_weight=BAR_WEIGHT,
        per_side=max(0.0, (target_weight - BAR_WEIGHT) / 2.0),
        plates_per_side=[PlateRead(weight=p.weight, count=p.count) for p in plates],
        total_weight=loaded_weight(plates),
    )
