"""Opaque key/value blob store plus codecs for what the tracker persists.

Every value is a whole blob replaced in one write. Decoding never raises:
a missing or unreadable value falls back to its default (cold start).
"""

from __future__ import annotations

import logging
import math
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from app.core.constants import (
    ACCESSORIES_KEY_PREFIX,
    BAR_WEIGHT,
    FAILURES_BEFORE_DELOAD,
    FAILURES_KEY_PREFIX,
    HISTORY_KEY,
    LAST_WORKOUT_TYPE_KEY,
    WEIGHT_KEY_PREFIX,
)
from app.core.enums import ExerciseKind, WorkoutType
from app.schemas.history import HistoryLogAdapter, WorkoutLogEntry
from app.schemas.plan import AccessoryExercise
from app.services.progression import ExerciseState, WorkingState
from app.services.rounding import floor_to_unit

logger = logging.getLogger(__name__)

AccessoryListAdapter = TypeAdapter(list[AccessoryExercise])


class BlobStore(Protocol):
    def get_bytes(self, key: str) -> bytes | None: ...

    def set_bytes(self, key: str, value: bytes) -> None: ...


class MemoryBlobStore:
    """In-process store; remembers which keys changed since the last drain."""

    def __init__(self, blobs: dict[str, bytes] | None = None) -> None:
        self._blobs: dict[str, bytes] = dict(blobs or {})
        self._dirty: set[str] = set()

    def get_bytes(self, key: str) -> bytes | None:
        return self._blobs.get(key)

    def set_bytes(self, key: str, value: bytes) -> None:
        self._blobs[key] = value
        self._dirty.add(key)

    def pending(self) -> dict[str, bytes]:
        """Changed blobs not yet persisted (each key once, latest value)."""
        return {key: self._blobs[key] for key in sorted(self._dirty)}

    def mark_clean(self, persisted: dict[str, bytes]) -> None:
        """Forget keys that were written; a key changed again since then stays dirty."""
        for key, value in persisted.items():
            if self._blobs.get(key) == value:
                self._dirty.discard(key)

    def drain_dirty(self) -> dict[str, bytes]:
        changed = self.pending()
        self.mark_clean(changed)
        return changed


# ---- History log ----


def encode_history(entries: list[WorkoutLogEntry]) -> bytes:
    return HistoryLogAdapter.dump_json(entries, by_alias=True)


def decode_history(data: bytes | None) -> list[WorkoutLogEntry]:
    if not data:
        return []
    try:
        return HistoryLogAdapter.validate_json(data)
    except ValidationError as e:
        logger.warning("Unreadable workout history, starting with an empty log: %s", e)
        return []


# ---- Working state snapshot ----


def _weight_key(kind: ExerciseKind) -> str:
    return f"{WEIGHT_KEY_PREFIX}{kind.slug}"


def _failures_key(kind: ExerciseKind) -> str:
    return f"{FAILURES_KEY_PREFIX}{kind.slug}"


def _read_text(store: BlobStore, key: str) -> str | None:
    data = store.get_bytes(key)
    if data is None:
        return None
    try:
        return data.decode("utf-8").strip()
    except UnicodeDecodeError:
        logger.warning("Snapshot value %s is not UTF-8 text; using default", key)
        return None


def _read_weight(store: BlobStore, kind: ExerciseKind) -> float:
    text = _read_text(store, _weight_key(kind))
    if text is None:
        return kind.starting_weight
    try:
        weight = float(text)
    except ValueError:
        weight = math.nan
    if not math.isfinite(weight) or weight < BAR_WEIGHT:
        logger.warning("Snapshot weight for %s is unreadable (%r); using default", kind.value, text)
        return kind.starting_weight
    return floor_to_unit(weight, kind.unit)


def _read_failures(store: BlobStore, kind: ExerciseKind) -> int:
    text = _read_text(store, _failures_key(kind))
    if text is None:
        return 0
    try:
        failures = int(text)
    except ValueError:
        logger.warning("Snapshot failures for %s is unreadable (%r); using 0", kind.value, text)
        return 0
    return failures if 0 <= failures < FAILURES_BEFORE_DELOAD else 0


def load_snapshot(store: BlobStore) -> WorkingState:
    """Rebuild WorkingState from its named values, defaulting each one independently."""
    exercises = {
        kind: ExerciseState(_read_weight(store, kind), _read_failures(store, kind))
        for kind in ExerciseKind
    }
    last = WorkoutType.B
    text = _read_text(store, LAST_WORKOUT_TYPE_KEY)
    if text is not None:
        try:
            last = WorkoutType(text)
        except ValueError:
            logger.warning("Snapshot workout type is unreadable (%r); using B", text)
    return WorkingState(exercises, last)


def save_snapshot(store: BlobStore, state: WorkingState) -> None:
    for kind, ex in state.exercises.items():
        store.set_bytes(_weight_key(kind), repr(float(ex.weight)).encode("utf-8"))
        store.set_bytes(_failures_key(kind), str(ex.failures).encode("utf-8"))
    store.set_bytes(LAST_WORKOUT_TYPE_KEY, state.last_workout_type.value.encode("utf-8"))


# ---- Accessory templates ----


def accessories_key(workout_type: WorkoutType) -> str:
    return f"{ACCESSORIES_KEY_PREFIX}{workout_type.value}"


def load_accessories(store: BlobStore, workout_type: WorkoutType) -> list[AccessoryExercise]:
    data = store.get_bytes(accessories_key(workout_type))
    if not data:
        return []
    try:
        return AccessoryListAdapter.validate_json(data)
    except ValidationError as e:
        logger.warning("Unreadable accessory template %s: %s", workout_type.value, e)
        return []


def save_accessories(store: BlobStore, workout_type: WorkoutType, items: list[AccessoryExercise]) -> None:
    store.set_bytes(accessories_key(workout_type), AccessoryListAdapter.dump_json(items))
