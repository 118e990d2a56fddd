"""Print what is stored: snapshot values, accessory templates and a log summary."""

import asyncio

from app.core.config import get_settings
from app.core.constants import HISTORY_KEY
from app.db.session import build_engine, build_session_maker
from app.services.blob_repository import load_blobs
from app.services.storage import decode_history


async def check_data():
    settings = get_settings()
    engine = build_engine(settings)
    async with build_session_maker(engine)() as session:
        try:
            blobs = await load_blobs(session)
        except Exception as e:
            print(f"Error reading kv_blobs: {e}")
            blobs = {}
    await engine.dispose()

    print(f"{len(blobs)} stored values in {settings.database_url}")
    for key in sorted(blobs):
        if key == HISTORY_KEY:
            continue
        print(f"  {key} = {blobs[key][:80]!r}")

    entries = decode_history(blobs.get(HISTORY_KEY))
    print(f"Workout log: {len(entries)} entries")
    for entry in entries[:10]:
        lifts = ", ".join(
            f"{r.kind.value} {r.weight:g}{'' if r.success else ' (missed)'}" for r in entry.exercises
        )
        print(f"  {entry.date:%Y-%m-%d} {entry.workout_type.value}: {lifts}")


if __name__ == "__main__":
    asyncio.run(check_data())
