"""Rest timer between sets, driven by a stored deadline.

The host process may be suspended while the timer runs, so remaining time is
always recomputed as ``deadline - now`` instead of counting ticks.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from app.core.constants import FINAL_SET_REST_SECONDS, REST_SECONDS


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def rest_seconds_for(
    set_index: int,
    set_count: int,
    rest_seconds: int = REST_SECONDS,
    final_set_rest_seconds: int = FINAL_SET_REST_SECONDS,
) -> int:
    """Longer rest after the last set of a lift (before moving to the next one)."""
    return final_set_rest_seconds if set_index == set_count - 1 else rest_seconds


class DeadlineClock:
    def __init__(self, now: Callable[[], datetime] = _utcnow) -> None:
        self._now = now
        self.deadline: datetime | None = None

    def start(self, duration_seconds: float) -> datetime:
        self.deadline = self._now() + timedelta(seconds=duration_seconds)
        return self.deadline

    def cancel(self) -> None:
        self.deadline = None

    def remaining(self) -> timedelta:
        if self.deadline is None:
            return timedelta(0)
        return max(timedelta(0), self.deadline - self._now())

    @property
    def expired(self) -> bool:
        return self.deadline is not None and self.remaining() == timedelta(0)


class RestTimer:
    def __init__(self, clock: DeadlineClock | None = None) -> None:
        self._clock = clock or DeadlineClock()
        self.initial_duration = REST_SECONDS

    @property
    def is_active(self) -> bool:
        if self._clock.expired:
            self.stop()
        return self._clock.deadline is not None

    def start(self, duration_seconds: int) -> None:
        self.stop()
        self.initial_duration = duration_seconds
        self._clock.start(duration_seconds)

    def stop(self) -> None:
        self._clock.cancel()

    def remaining_seconds(self) -> int:
        """Whole seconds left; an elapsed timer stops itself and reports 0."""
        if not self.is_active:
            return 0
        return round(self._clock.remaining().total_seconds())

    def resume(self) -> int:
        """Call when the host comes back from suspension."""
        return self.remaining_seconds()

    def progress(self) -> float:
        """Fraction of the rest period still remaining (1.0 at start, 0.0 when done)."""
        if self.initial_duration <= 0:
            return 0.0
        return min(1.0, self.remaining_seconds() / self.initial_duration)
