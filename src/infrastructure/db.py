"""SQLAlchemy engine management for the ledger database.

One pooled engine per database URL is kept for the lifetime of the
process. ``LEDGER_DB_URL`` is the default source of the URL; settings
objects can pass an explicit URL instead.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort

LEDGER_DB_URL_VAR = "LEDGER_DB_URL"


def _get_env_var(name: str) -> str:
    """Return a required environment variable, loading ``.env`` first.

    Raises:
        RuntimeError: If the variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Build a pooled engine for the banks and transactions tables.

    Args:
        db_url: SQLAlchemy URL of the ledger database.

    Returns:
        Engine: Engine with a small QueuePool and pre-ping enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_ledger_engine: Optional[Engine] = None


def get_ledger_engine() -> Engine:
    """Return the process-wide engine configured by ``LEDGER_DB_URL``."""
    global _ledger_engine
    if _ledger_engine is None:
        _ledger_engine = _create_engine(_get_env_var(LEDGER_DB_URL_VAR))
    return _ledger_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Engine port for the SQL ledger repository.

    Resolution order: an injected engine, then an engine built from an
    explicit ``db_url``, then the ``LEDGER_DB_URL`` singleton.
    """

    def __init__(
        self,
        engine: Engine | None = None,
        db_url: str | None = None,
    ) -> None:
        self._engine = engine
        self._db_url = db_url

    def get_ledger_engine(self) -> Engine:
        if self._engine is None and self._db_url:
            self._engine = _create_engine(self._db_url)
        if self._engine is not None:
            return self._engine
        return get_ledger_engine()


__all__ = [
    "get_ledger_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
