"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

import dotenv

from src.infrastructure.logging.logger import get_app_logger

DEFAULT_API_URL = "http://localhost:3000/api"
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for selecting and reaching the ledger backend.

    Attributes:
        backend: Backend identifier (api or sqlalchemy).
        api_url: Base URL of the remote ledger API.
        api_token: Optional bearer token attached to API requests.
        timeout_seconds: HTTP timeout for API requests.
        db_url: Optional database URL for the sqlalchemy backend.
    """

    backend: str = "api"
    api_url: str = DEFAULT_API_URL
    api_token: Optional[str] = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    db_url: Optional[str] = None

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        backend = os.getenv("LEDGER_BACKEND", "api").strip().lower()
        api_url = os.getenv("LEDGER_API_URL", DEFAULT_API_URL).strip()
        api_token = cls._resolve_token(
            os.getenv("LEDGER_API_TOKEN"),
            os.getenv("LEDGER_API_TOKEN_FILE"),
            logger=logger,
        )
        timeout = cls._parse_timeout(
            os.getenv("LEDGER_API_TIMEOUT"),
            logger=logger,
        )
        return cls(
            backend=backend,
            api_url=api_url.rstrip("/"),
            api_token=api_token,
            timeout_seconds=timeout,
            db_url=os.getenv("LEDGER_DB_URL") or None,
        )

    @staticmethod
    def _resolve_token(
        raw_token: str | None,
        token_file: str | None,
        logger,
    ) -> str | None:
        """Return the API token from the environment or a token file.

        Args:
            raw_token: Token value from the environment.
            token_file: Optional path to a file holding the token.
            logger: Logger used for warnings.

        Returns:
            str | None: Token when configured.
        """
        if raw_token and raw_token.strip():
            return raw_token.strip()
        if not token_file:
            return None
        path = Path(token_file).expanduser()
        if not path.exists():
            logger.warning(f"API token file does not exist at {path}")
            return None
        token = path.read_text(encoding="utf-8").strip()
        return token or None

    @staticmethod
    def _parse_timeout(raw_timeout: str | None, logger) -> float:
        if not raw_timeout:
            return DEFAULT_TIMEOUT_SECONDS
        try:
            timeout = float(raw_timeout)
        except ValueError:
            logger.warning(
                f"Invalid LEDGER_API_TIMEOUT={raw_timeout!r}; "
                f"using {DEFAULT_TIMEOUT_SECONDS}"
            )
            return DEFAULT_TIMEOUT_SECONDS
        if timeout <= 0:
            logger.warning(
                f"Non-positive LEDGER_API_TIMEOUT={raw_timeout!r}; "
                f"using {DEFAULT_TIMEOUT_SECONDS}"
            )
            return DEFAULT_TIMEOUT_SECONDS
        return timeout


__all__ = ["LedgerSettings"]
