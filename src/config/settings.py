"""Application configuration settings."""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


DEFAULT_DATABASE_URL = "postgresql://postgres:@localhost:5432/deptemp"


@dataclass
class Settings:
    """Main application settings."""

    # Application info
    app_name: str = "Dept/Emp API"
    app_version: str = "1.0.0"

    # Server
    host: str = "127.0.0.1"
    port: int = 8080
    workers: int = 10
    log_level: str = "info"

    # Database
    database_url: str = DEFAULT_DATABASE_URL
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_echo: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables."""
        return cls(
            app_name=os.getenv("APP_NAME", "Dept/Emp API"),
            app_version=os.getenv("APP_VERSION", "1.0.0"),
            host=os.getenv("HOST", "127.0.0.1"),
            port=int(os.getenv("PORT", "8080")),
            workers=int(os.getenv("WORKERS", "10")),
            log_level=os.getenv("LOG_LEVEL", "info").lower(),
            database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
            database_pool_size=int(os.getenv("DB_POOL_SIZE", "5")),
            database_max_overflow=int(os.getenv("DB_MAX_OVERFLOW", "10")),
            database_echo=os.getenv("DB_ECHO", "false").lower() == "true",
        )


# Singleton settings instance
_settings: Optional[Settings] = None


@lru_cache()
def get_settings() -> Settings:
    """Get application settings (cached)."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
    get_settings.cache_clear()
