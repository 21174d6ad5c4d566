"""Use case to gather commitment alerts from both ledgers."""

from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.ledger_loading import (
    load_entries,
    load_receivables,
)
from src.domain.models import FinancialAlerts
from src.domain.services.ingestion import commitments_from_entries
from src.domain.services.insights import compute_financial_alerts
from src.infrastructure.logging.logger import get_app_logger


class GetFinancialAlertsUseCase:
    """Combine receivables and bank entries into alert buckets."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, today: date) -> FinancialAlerts:
        """Return overdue, pending and recent commitments.

        Args:
            today: Current calendar day.

        Returns:
            FinancialAlerts: Alert buckets over both ledgers.
        """
        commitments = load_receivables(self._ledger_repository)
        commitments.extend(
            commitments_from_entries(load_entries(self._ledger_repository))
        )
        alerts = compute_financial_alerts(commitments, today)
        self._logger.info(
            f"Financial alerts computed: overdue={len(alerts.overdue)}, "
            f"pending={len(alerts.pending)}, recent={len(alerts.recent)}"
        )
        return alerts


__all__ = ["GetFinancialAlertsUseCase", "FinancialAlerts"]
