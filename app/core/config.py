"""Application configuration from environment variables."""

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.constants import FINAL_SET_REST_SECONDS, REST_SECONDS


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "StrongLifts 5x5 Tracker API"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # API
    api_v1_prefix: str = "/api/v1"

    # Database: sqlite+aiosqlite locally, postgresql+asyncpg in production
    database_url: str = "sqlite+aiosqlite:///./stronglifts.db"
    database_pool_size: int = 5
    database_max_overflow: int = 10
    # Create the blob table on startup (use Alembic in production)
    auto_create_tables: bool = True

    # CORS: comma-separated list of allowed origins in production
    cors_origins: str = ""

    # Calendar day for history lookups (IANA name, e.g. Europe/Berlin)
    timezone: str = "UTC"

    # Rest timer
    rest_seconds: int = REST_SECONDS
    final_set_rest_seconds: int = FINAL_SET_REST_SECONDS

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone {value!r}") from e
        return value

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def sync_database_url(self) -> str:
        """Synchronous URL for Alembic and tooling."""
        return (
            self.database_url.replace("+aiosqlite", "")
            .replace("+asyncpg", "")
        )


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
