"""Use case to summarize the ledger over a date window."""

from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.ledger_loading import load_entries
from src.domain.models import PeriodSummary
from src.domain.services.ledger import compute_period_summary
from src.infrastructure.logging.logger import get_app_logger


class GetPeriodSummaryUseCase:
    """Compute credit, debit and status totals for a period."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger rows.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        start_date: date,
        end_date: date,
        account_id: str | None = None,
    ) -> PeriodSummary:
        """Return the summary of the inclusive window.

        Args:
            start_date: First day of the window.
            end_date: Last day of the window.
            account_id: Optional account to restrict the summary to.

        Returns:
            PeriodSummary: Totals for the window.

        Raises:
            ValueError: If ``start_date`` is after ``end_date``.
        """
        if start_date > end_date:
            raise ValueError(
                f"start_date {start_date} is after end_date {end_date}"
            )
        entries = load_entries(self._ledger_repository, start_date, end_date)
        summary = compute_period_summary(
            entries,
            start_date,
            end_date,
            account_id,
        )
        self._logger.info(
            f"Period summary computed: credit={summary.total_credit}, "
            f"debit={summary.total_debit}, count={summary.count}"
        )
        return summary


__all__ = ["GetPeriodSummaryUseCase", "PeriodSummary"]
