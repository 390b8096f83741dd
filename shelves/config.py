# shelves/config.py
import os
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///shelves.db"


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring invalid integer for %s: %r (using %d)", name, raw, default)
        return default


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the smart shelf engine.

    Values come from environment variables so the API, the CLI and the tests
    can all point at different databases without code changes.
    """
    database_url: str = DEFAULT_DATABASE_URL
    max_workers: int = 8
    default_limit: int = 20
    max_limit: int = 100
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
            max_workers=max(1, _int_from_env("SMART_SHELF_MAX_WORKERS", cls.max_workers)),
            default_limit=max(1, _int_from_env("SMART_SHELF_DEFAULT_LIMIT", cls.default_limit)),
            # pages are never larger than 100 items
            max_limit=min(cls.max_limit, max(1, _int_from_env("SMART_SHELF_MAX_LIMIT", cls.max_limit))),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
        )


def configure_logging(level: str) -> None:
    """Configure root logging for an entry point (CLI or API)."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
