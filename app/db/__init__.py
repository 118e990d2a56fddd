"""Database package: engine, session, base."""

from app.db.session import build_engine, build_session_maker, get_db

__all__ = ["build_engine", "build_session_maker", "get_db"]
