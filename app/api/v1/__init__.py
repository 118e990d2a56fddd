"""API v1 router aggregation."""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    accessories,
    health,
    history,
    plan,
    records,
    state,
    timer,
    tools,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(plan.router, prefix="/plan", tags=["plan"])
api_router.include_router(state.router, prefix="/state", tags=["state"])
api_router.include_router(history.router, prefix="/history", tags=["history"])
api_router.include_router(records.router, prefix="/records", tags=["records"])
api_router.include_router(accessories.router, prefix="/accessories", tags=["accessories"])
api_router.include_router(tools.router, prefix="/tools", tags=["tools"])
api_router.include_router(timer.router, prefix="/timer", tags=["timer"])
