"""Application configuration and logging setup."""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Repository-level data directory (next to src/)
DEFAULT_DATA_DIR = Path(__file__).parent.parent.parent / "data"


class AppConfig(BaseSettings):
    """Settings loaded from CALISTHENICS_* environment variables (and .env)."""

    model_config = SettingsConfigDict(
        env_prefix="CALISTHENICS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    data_dir: Path = DEFAULT_DATA_DIR
    db_name: str = "calisthenics.db"

    # Seed values for the AppSettings row
    default_rest_timer_seconds: int = 90

    log_level: str = "WARNING"


@lru_cache
def get_config() -> AppConfig:
    """Cached config instance."""
    return AppConfig()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for CLI and server use."""
    if level is None:
        level = get_config().log_level
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
