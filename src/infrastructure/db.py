"""SQLAlchemy engine management for the wealth records database.

The records, market data and snapshot repositories share one lazily
created engine. The URL comes from ``WEALTH_DB_URL`` (a local ``.env`` file
is honoured), so the same code runs against PostgreSQL in production and a
SQLite file on a laptop.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort

DB_URL_ENV_VAR = "WEALTH_DB_URL"


def _get_env_var(name: str) -> str:
    """Return a required environment variable.

    Args:
        name: Variable to read after loading ``.env``.

    Returns:
        str: Non-empty value.

    Raises:
        RuntimeError: If the variable is unset or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create the engine with pooling suited to the backend.

    Server databases get a small pre-pinged QueuePool. SQLite keeps
    SQLAlchemy's default pool and allows use across Streamlit's script
    threads.

    Args:
        db_url: SQLAlchemy database URL.

    Returns:
        Engine: Configured engine.
    """
    if make_url(db_url).get_backend_name() == "sqlite":
        return create_engine(
            db_url,
            connect_args={"check_same_thread": False},
            future=True,
        )
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_wealth_engine: Optional[Engine] = None


def get_wealth_engine() -> Engine:
    """Return the shared engine, creating it on first use."""
    global _wealth_engine
    if _wealth_engine is None:
        _wealth_engine = _create_engine(_get_env_var(DB_URL_ENV_VAR))
    return _wealth_engine


def dispose_wealth_engine() -> None:
    """Close pooled connections and forget the shared engine."""
    global _wealth_engine
    if _wealth_engine is not None:
        _wealth_engine.dispose()
        _wealth_engine = None


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort serving the shared wealth engine."""

    def get_engine(self) -> Engine:
        """Return the engine connected to the records database."""
        return get_wealth_engine()


__all__ = [
    "DB_URL_ENV_VAR",
    "get_wealth_engine",
    "dispose_wealth_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
