"""Factory helpers to select the ledger repository backend."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.infrastructure.api_ledger_repository import ApiLedgerRepository
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings
from src.infrastructure.sql_ledger_repository import (
    SqlAlchemyLedgerRepository,
)


def create_ledger_repository(
    settings: LedgerSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
    logger=None,
) -> LedgerRepositoryPort:
    """Return a ledger repository implementation based on configuration.

    Args:
        settings: Optional settings, read from the environment when absent.
        db_port: Optional port providing the ledger engine (SQL backend).
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        LedgerRepositoryPort: Concrete repository implementation.

    Raises:
        RuntimeError: If the sqlalchemy backend has no database configured.
        ValueError: If the backend is not supported.
    """
    resolved_logger = logger or get_app_logger()
    resolved_settings = settings or LedgerSettings.from_env()
    backend = resolved_settings.backend

    if backend == "api":
        if not resolved_settings.api_token:
            resolved_logger.warning(
                "No API token configured; requests are sent unauthenticated"
            )
        resolved_logger.info(f"Using ledger API at {resolved_settings.api_url}")
        return ApiLedgerRepository(
            resolved_settings.api_url,
            token=resolved_settings.api_token,
            timeout=resolved_settings.timeout_seconds,
        )

    if backend == "sqlalchemy":
        if db_port is None:
            if not resolved_settings.db_url:
                raise RuntimeError(
                    "SQLAlchemy backend requires a LEDGER_DB_URL value."
                )
            db_port = SqlAlchemyDatabaseEngineAdapter(
                db_url=resolved_settings.db_url
            )
        resolved_logger.info("Using SQLAlchemy ledger repository")
        return SqlAlchemyLedgerRepository(db_port)

    raise ValueError(
        f"Unsupported ledger backend: {backend}. Expected api or sqlalchemy."
    )


__all__ = ["create_ledger_repository"]
