"""
Application configuration. Loads from environment variables.
Secrets and sensitive config must never be hardcoded.
"""

import os

from dotenv import load_dotenv

load_dotenv()
from functools import lru_cache
from typing import Optional


@lru_cache(maxsize=1)
def get_settings() -> "Settings":
    """Return cached settings instance."""
    return Settings()


class Settings:
    """Application settings loaded from environment."""

    # App
    app_name: str = "ReloadLog"
    debug: bool = False

    # Database (sqlite for local use; postgresql+psycopg for psycopg3 deployments)
    database_url: str = "sqlite:///./reloadlog.db"
    db_connect_timeout: int = 10  # seconds

    # Pagination for session listings
    default_page_size: int = 20

    # Reference data YAML; None = packaged app/reference_data/reference_data.yaml
    reference_data_path: Optional[str] = None

    def __init__(self) -> None:
        self.app_name = os.getenv("APP_NAME", self.app_name)
        self.debug = os.getenv("DEBUG", "false").lower() == "true"

        raw_url = os.getenv("DATABASE_URL", self.database_url)
        # Ensure psycopg3 driver if URL uses generic postgresql://
        if raw_url.startswith("postgresql://") and not raw_url.startswith("postgresql+psycopg"):
            raw_url = raw_url.replace("postgresql://", "postgresql+psycopg://", 1)
        self.database_url = raw_url
        self.db_connect_timeout = int(os.getenv("DB_CONNECT_TIMEOUT", str(self.db_connect_timeout)))

        self.default_page_size = int(
            os.getenv("DEFAULT_PAGE_SIZE", str(self.default_page_size))
        )
        self.reference_data_path = os.getenv("REFERENCE_DATA_PATH") or None

    @property
    def is_sqlite(self) -> bool:
        """True when the configured database is SQLite (file or in-memory)."""
        return self.database_url.startswith("sqlite")
