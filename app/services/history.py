"""History store: the ordered workout log and replay of the progression engine."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone, tzinfo
from uuid import UUID

from app.core.constants import HISTORY_KEY
from app.schemas.history import WorkoutLogEntry
from app.services.progression import ProgressionEngine, WorkingState
from app.services.storage import BlobStore, decode_history, encode_history

logger = logging.getLogger(__name__)


def _local_day(moment: datetime, tz: tzinfo) -> date:
    """Calendar day of a moment in tz; naive moments are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(tz).date()


class HistoryStore:
    """
    Owns the log (index 0 = most recent). Every change rewrites the whole
    log blob. Current weights can always be rebuilt from the log alone with
    recompute(), which replays it oldest-first from the starting weights.
    """

    def __init__(self, engine: ProgressionEngine, store: BlobStore, tz: tzinfo = timezone.utc) -> None:
        self._engine = engine
        self._store = store
        self._tz = tz
        self._entries: list[WorkoutLogEntry] = []

    @property
    def entries(self) -> tuple[WorkoutLogEntry, ...]:
        """Newest first."""
        return tuple(self._entries)

    def load(self) -> None:
        self._entries = decode_history(self._store.get_bytes(HISTORY_KEY))
        logger.info("Loaded %d workout log entries", len(self._entries))

    def _write(self) -> None:
        self._store.set_bytes(HISTORY_KEY, encode_history(self._entries))

    def append(self, entry: WorkoutLogEntry) -> None:
        self._entries.insert(0, entry)
        self._engine.mark_workout(entry.workout_type)
        self._write()

    def remove_by_id(self, entry_id: UUID) -> bool:
        """Delete one entry and rebuild state from what is left. Unknown ids are ignored."""
        index = next((i for i, e in enumerate(self._entries) if e.id == entry_id), None)
        if index is None:
            return False
        del self._entries[index]
        self.recompute()
        self._write()
        logger.info("Deleted log entry %s, replayed %d entries", entry_id, len(self._entries))
        return True

    def recompute(self) -> WorkingState:
        self._engine.reset_to_defaults()
        for entry in reversed(self._entries):
            for result in entry.exercises:
                self._engine.apply_result(result.kind, result.weight, result.success)
            self._engine.mark_workout(entry.workout_type)
        return self._engine.state

    def entry_for(self, day: date | datetime) -> WorkoutLogEntry | None:
        """The entry logged on that calendar day in the configured timezone, if any."""
        if isinstance(day, datetime):
            day = _local_day(day, self._tz)
        return next((e for e in self._entries if _local_day(e.date, self._tz) == day), None)

    def get(self, entry_id: UUID) -> WorkoutLogEntry | None:
        return next((e for e in self._entries if e.id == entry_id), None)
