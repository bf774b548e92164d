"""Tests for environment configuration and engine options."""

import pytest
from sqlalchemy.pool import StaticPool

from src.config.settings import DEFAULT_DATABASE_URL, get_settings, reset_settings
from src.database.database import DatabaseConfig


@pytest.fixture(autouse=True)
def fresh_settings():
    """Clear cached settings around each test."""
    reset_settings()
    yield
    reset_settings()


class TestSettings:
    """Tests for Settings.from_env."""

    def test_defaults(self, monkeypatch):
        """Test defaults apply when nothing is set."""
        for name in ("HOST", "PORT", "WORKERS", "LOG_LEVEL", "DATABASE_URL", "DB_ECHO"):
            monkeypatch.delenv(name, raising=False)

        settings = get_settings()

        assert settings.host == "127.0.0.1"
        assert settings.port == 8080
        assert settings.workers == 10
        assert settings.log_level == "info"
        assert settings.database_url == DEFAULT_DATABASE_URL
        assert settings.database_echo is False

    def test_environment_overrides(self, monkeypatch):
        """Test environment variables override defaults."""
        monkeypatch.setenv("PORT", "9090")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("DATABASE_URL", "sqlite:///deptemp.db")
        monkeypatch.setenv("DB_ECHO", "true")

        settings = get_settings()

        assert settings.port == 9090
        assert settings.log_level == "debug"
        assert settings.database_url == "sqlite:///deptemp.db"
        assert settings.database_echo is True

    def test_settings_are_cached(self):
        """Test the same settings object is returned until reset."""
        assert get_settings() is get_settings()


class TestDatabaseConfig:
    """Tests for engine options per backend."""

    def test_server_database_pools(self):
        """Test a server database gets a sized, pre-pinged pool."""
        options = DatabaseConfig(url=DEFAULT_DATABASE_URL, pool_size=3).engine_options()

        assert options["pool_size"] == 3
        assert options["max_overflow"] == 10
        assert options["pool_pre_ping"] is True

    def test_in_memory_sqlite_shares_one_connection(self):
        """Test in-memory SQLite uses a static pool."""
        config = DatabaseConfig(url="sqlite://")

        assert config.is_in_memory
        assert config.engine_options()["poolclass"] is StaticPool

    def test_file_sqlite(self):
        """Test file-backed SQLite allows cross-thread use without a static pool."""
        options = DatabaseConfig(url="sqlite:///deptemp.db").engine_options()

        assert options["connect_args"] == {"check_same_thread": False}
        assert "poolclass" not in options

    def test_from_env(self, monkeypatch):
        """Test config is read from settings."""
        monkeypatch.setenv("DATABASE_URL", "sqlite://")
        monkeypatch.setenv("DB_POOL_SIZE", "7")

        config = DatabaseConfig.from_env()

        assert config.url == "sqlite://"
        assert config.pool_size == 7
