"""
Tests for flushing tracker blobs to the database: a successful flush is
committed and cleared, a failed one leaves every key pending.
"""
import asyncio

import pytest

from app.core.constants import HISTORY_KEY, LAST_WORKOUT_TYPE_KEY
from app.db.base import Base
from app.db.session import build_engine, build_session_maker
from app.models import KeyValueBlob  # noqa: F401
from app.services.blob_repository import flush_store, load_blobs


class _EmptyResult:
    def scalars(self):
        return self

    def all(self):
        return []


class UnreachableSession:
    async def execute(self, statement):
        raise RuntimeError("database is unreachable")


class CommitFailsSession:
    def __init__(self):
        self.added = []

    async def execute(self, statement):
        return _EmptyResult()

    def add(self, row):
        self.added.append(row)

    async def flush(self):
        pass

    async def commit(self):
        raise RuntimeError("commit failed")


async def _flush_and_reload(settings, store):
    engine = build_engine(settings)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_maker = build_session_maker(engine)
    async with session_maker() as session:
        await flush_store(session, store)
    async with session_maker() as session:
        blobs = await load_blobs(session)
    await engine.dispose()
    return blobs


class TestFlushStore:
    def test_flush_commits_and_clears_pending(self, tracker, store, settings):
        tracker.finish_session()
        written = store.pending()

        blobs = asyncio.run(_flush_and_reload(settings, store))
        assert blobs == written
        assert store.pending() == {}

    def test_failed_write_keeps_keys_pending(self, tracker, store):
        tracker.finish_session()
        before = store.pending()

        with pytest.raises(RuntimeError):
            asyncio.run(flush_store(UnreachableSession(), store))
        assert store.pending() == before
        assert HISTORY_KEY in before

    def test_failed_commit_keeps_keys_pending(self, tracker, store):
        tracker.finish_session()
        before = store.pending()
        session = CommitFailsSession()

        with pytest.raises(RuntimeError):
            asyncio.run(flush_store(session, store))
        assert len(session.added) == len(before)
        assert store.pending() == before

    def test_retry_after_failure_persists_everything(self, tracker, store, settings):
        tracker.finish_session()
        with pytest.raises(RuntimeError):
            asyncio.run(flush_store(UnreachableSession(), store))

        blobs = asyncio.run(_flush_and_reload(settings, store))
        assert blobs[LAST_WORKOUT_TYPE_KEY] == b"A"
        assert HISTORY_KEY in blobs


class TestMarkClean:
    def test_key_rewritten_after_snapshot_stays_pending(self, store):
        store.set_bytes("a", b"1")
        store.set_bytes("b", b"2")
        pending = store.pending()
        store.set_bytes("a", b"3")

        store.mark_clean(pending)
        assert store.pending() == {"a": b"3"}
