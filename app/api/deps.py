"""Shared endpoint dependencies."""

from fastapi import Request

from app.services.tracker import Tracker


def get_tracker(request: Request) -> Tracker:
    """The process-wide tracker built at startup (single user, single device)."""
    return request.app.state.tracker
