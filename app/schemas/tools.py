"""Warm-up, plate calculator and rest timer schemas."""

from pydantic import BaseModel, Field


class WarmupSetRead(BaseModel):
    weight: float
    reps: str


class WarmupResponse(BaseModel):
    work_weight: float
    sets: list[WarmupSetRead]


class PlateRead(BaseModel):
    weight: float
    count: int


class PlateCalculatorResponse(BaseModel):
    target_weight: float
    bar_weight: float
    per_side: float
    plates_per_side: list[PlateRead]
    total_weight: float  # bar + plates actually loaded


class TimerStartRequest(BaseModel):
    duration_seconds: int = Field(gt=0, le=3600)


class TimerStatus(BaseModel):
    is_active: bool
    remaining_seconds: int
    initial_duration: int
    progress: float
