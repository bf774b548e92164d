"""Database connection and session management."""

from dataclasses import dataclass
from typing import Any, Dict, Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from src.config.settings import get_settings
from src.models.base import Base


@dataclass
class DatabaseConfig:
    """Database configuration settings."""

    url: str
    pool_size: int = 5
    max_overflow: int = 10
    echo: bool = False

    @classmethod
    def from_env(cls) -> "DatabaseConfig":
        """Create config from environment-backed settings."""
        settings = get_settings()
        return cls(
            url=settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            echo=settings.database_echo,
        )

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @property
    def is_in_memory(self) -> bool:
        return self.is_sqlite and (self.url.endswith("://") or ":memory:" in self.url)

    def engine_options(self) -> Dict[str, Any]:
        """Keyword arguments for ``create_engine``."""
        if self.is_sqlite:
            options: Dict[str, Any] = {
                "echo": self.echo,
                "connect_args": {"check_same_thread": False},
            }
            if self.is_in_memory:
                # One shared connection so every session sees the same database
                options["poolclass"] = StaticPool
            return options
        return {
            "echo": self.echo,
            "pool_size": self.pool_size,
            "max_overflow": self.max_overflow,
            "pool_pre_ping": True,  # Verify connections before use
        }


# Module-level engine and session factory (initialized lazily)
_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker[Session]] = None


def get_engine(config: Optional[DatabaseConfig] = None) -> Engine:
    """
    Get or create the SQLAlchemy engine.

    One engine, and therefore one thread-safe connection pool, is shared by
    every request handled in this process.
    """
    global _engine

    if _engine is None:
        if config is None:
            config = DatabaseConfig.from_env()

        _engine = create_engine(config.url, **config.engine_options())

    return _engine


def get_session_factory(config: Optional[DatabaseConfig] = None) -> sessionmaker[Session]:
    """Get or create the session factory."""
    global _session_factory

    if _session_factory is None:
        engine = get_engine(config)
        _session_factory = sessionmaker(
            bind=engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )

    return _session_factory


def get_db() -> Generator[Session, None, None]:
    """
    Dependency that provides a database session.

    Use with FastAPI's Depends() for automatic session management.
    Services commit their own writes before returning, so nothing is left
    to commit once the response is sent. Rolls back on exception.
    """
    session_factory = get_session_factory()
    session = session_factory()

    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(config: Optional[DatabaseConfig] = None) -> None:
    """
    Initialize database by creating all tables.

    Should only be used in development/testing.
    Use Alembic migrations for production.
    """
    engine = get_engine(config)
    Base.metadata.create_all(bind=engine)


def dispose_engine() -> None:
    """
    Dispose of the engine and reset module state.

    Useful for testing and graceful shutdown.
    """
    global _engine, _session_factory

    if _engine is not None:
        _engine.dispose()
        _engine = None
        _session_factory = None
