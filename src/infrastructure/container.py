"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.get_account_balances import (
    GetAccountBalancesUseCase,
)
from src.application.use_cases.get_dashboard import GetDashboardUseCase
from src.application.use_cases.get_financial_alerts import (
    GetFinancialAlertsUseCase,
)
from src.infrastructure.ledger_repository_factory import (
    create_ledger_repository,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the configured ledger repository."""
    return create_ledger_repository(
        LedgerSettings.from_env(),
        db_port=db_port,
        logger=get_app_logger(),
    )


def build_dashboard_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> GetDashboardUseCase:
    """Return the dashboard use case wired to the configured backend."""
    return GetDashboardUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
    )


def build_account_balances_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> GetAccountBalancesUseCase:
    """Return the account balances use case."""
    return GetAccountBalancesUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
    )


def build_financial_alerts_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> GetFinancialAlertsUseCase:
    """Return the financial alerts use case."""
    return GetFinancialAlertsUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_ledger_repository",
    "build_dashboard_use_case",
    "build_account_balances_use_case",
    "build_financial_alerts_use_case",
]
