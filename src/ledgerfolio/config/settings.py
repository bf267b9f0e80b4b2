"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_data_dir() -> Path:
    """Return the default data directory."""
    return Path.home() / ".ledgerfolio"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Ledgerfolio"
    app_version: str = "0.1.0"

    # Data directory (all app data lives here)
    data_dir: Optional[Path] = None

    # Database URL (derived from data_dir if not set explicitly)
    database_url: Optional[str] = None

    log_level: str = "INFO"

    # Seconds a SQLite writer waits for the write lock before failing
    sqlite_busy_timeout_seconds: float = 30.0

    # Per-user resource limits
    max_portfolio_accounts: int = 20
    max_assets: int = 200

    # External price service ("currency_api" or "stub")
    price_provider: str = "currency_api"
    price_api_primary_url: str = "https://cdn.jsdelivr.net/npm/@fawazahmed0/currency-api@{date}/v1/"
    price_api_fallback_url: str = "https://{date}.currency-api.pages.dev/v1/"
    price_api_timeout_seconds: float = 10.0
    price_latest_date_ttl_seconds: int = 30 * 60
    price_currencies_ttl_seconds: int = 24 * 60 * 60

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """Get database URL, deriving from data_dir if not set."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / "ledgerfolio.db"
        return f"sqlite:///{db_path}"


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Replace the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
