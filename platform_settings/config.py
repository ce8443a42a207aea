"""
Application configuration. Loads from environment variables.
Secrets and sensitive config must never be hardcoded.
"""

import os

from dotenv import load_dotenv

load_dotenv()
from functools import lru_cache


@lru_cache(maxsize=1)
def get_settings() -> "Settings":
    """Return cached settings instance."""
    return Settings()


def _env(*names: str, default: str = "") -> str:
    """Return the first non-empty env var among names (new name first, legacy after)."""
    for name in names:
        value = os.getenv(name)
        if value and value.strip():
            return value.strip()
    return default


class Settings:
    """Application settings loaded from environment."""

    # App
    app_name: str = "Platform Settings"
    debug: bool = False

    # Database (postgresql+psycopg for psycopg3; use postgresql:// for psycopg2)
    database_url: str = "postgresql+psycopg://localhost:5432/platform_settings_dev"
    db_connect_timeout: int = 10  # seconds

    # Object store (Supabase-compatible Storage API)
    storage_url: str = ""
    storage_key: str = ""
    storage_bucket: str = ""  # empty = branding uploads disabled (ConfigError)
    storage_timeout: float = 30.0

    def __init__(self) -> None:
        self.app_name = os.getenv("APP_NAME", self.app_name)
        self.debug = os.getenv("DEBUG", "false").lower() == "true"

        default_user = os.getenv("PGUSER") or os.getenv("USER") or "postgres"
        default_url = (
            f"postgresql+psycopg://{default_user}:"
            f"{os.getenv('PGPASSWORD', '')}@"
            f"{os.getenv('PGHOST', 'localhost')}:"
            f"{os.getenv('PGPORT', '5432')}/"
            f"{os.getenv('PGDATABASE', 'platform_settings_dev')}"
        )
        raw_url = os.getenv("DATABASE_URL", default_url)
        # Ensure psycopg3 driver if URL uses generic postgresql://
        if raw_url.startswith("postgresql://") and not raw_url.startswith("postgresql+psycopg"):
            raw_url = raw_url.replace("postgresql://", "postgresql+psycopg://", 1)
        self.database_url = raw_url
        self.db_connect_timeout = int(os.getenv("DB_CONNECT_TIMEOUT", str(self.db_connect_timeout)))

        # SUPABASE_* names are still honoured for existing deployments
        self.storage_url = _env("STORAGE_URL", "SUPABASE_URL").rstrip("/")
        self.storage_key = _env("STORAGE_KEY", "SUPABASE_KEY")
        self.storage_bucket = _env("STORAGE_BUCKET", "SUPABASE_BUCKET")
        self.storage_timeout = float(os.getenv("STORAGE_TIMEOUT", str(self.storage_timeout)))

    @property
    def storage_configured(self) -> bool:
        """True when the object store endpoint and key are both set."""
        return bool(self.storage_url and self.storage_key)
