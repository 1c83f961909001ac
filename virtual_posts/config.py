from functools import lru_cache
from pathlib import Path
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Virtual Posts API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///data/posts.db"

    # Site context used to derive GUIDs and GMT dates of virtual posts
    home_url: str = "http://localhost:8030"
    site_timezone: str = "UTC"

    # Virtual page definitions (relative to the working directory)
    virtual_pages_file: str = "data/virtual-pages.yaml"

    # Query pipeline
    default_query_limit: int = 10

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_pipeline: str = "INFO"         # PostQueryService pipeline

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def tzinfo(self) -> ZoneInfo:
        """Resolve ``site_timezone`` to a tzinfo. Unknown names raise."""
        return ZoneInfo(self.site_timezone)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
