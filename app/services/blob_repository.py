"""Load and save tracker blobs in the kv_blobs table."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.blob import KeyValueBlob
from app.services.storage import MemoryBlobStore


async def load_blobs(db: AsyncSession) -> dict[str, bytes]:
    result = await db.execute(select(KeyValueBlob.key, KeyValueBlob.value))
    return {row.key: bytes(row.value) for row in result.all()}


async def save_blobs(db: AsyncSession, blobs: dict[str, bytes]) -> None:
    """Whole-value replace for each key (insert when new)."""
    if not blobs:
        return
    result = await db.execute(select(KeyValueBlob).where(KeyValueBlob.key.in_(list(blobs))))
    existing = {row.key: row for row in result.scalars().all()}
    for key, value in blobs.items():
        row = existing.get(key)
        if row is None:
            db.add(KeyValueBlob(key=key, value=value))
        else:
            row.value = value
    await db.flush()


async def flush_store(db: AsyncSession, store: MemoryBlobStore) -> None:
    """
    Persist whatever the tracker changed and commit. Keys stay dirty until the
    commit succeeds, so a failed request is retried by the next flush.
    """
    pending = store.pending()
    if not pending:
        return
    await save_blobs(db, pending)
    await db.commit()
    store.mark_clean(pending)
