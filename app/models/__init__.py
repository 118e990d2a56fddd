"""ORM models - import all so Base.metadata is complete for migrations."""

from app.models.blob import KeyValueBlob

__all__ = ["KeyValueBlob"]
