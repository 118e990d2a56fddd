"""Drop the tracker tables (all weights, history and templates are lost)."""

import asyncio

from sqlalchemy import text

from app.core.config import get_settings
from app.db.base import Base
from app.db.session import build_engine
from app.models import KeyValueBlob  # noqa: F401


async def drop_tables():
    settings = get_settings()
    engine = build_engine(settings)
    print(f"Dropping all tables in {settings.database_url} ...")
    async with engine.begin() as conn:
        await conn.execute(text("DROP TABLE IF EXISTS alembic_version"))
        await conn.run_sync(Base.metadata.drop_all)
    print("Tables dropped.")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(drop_tables())
