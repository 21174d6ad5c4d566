"""Use case to compute the monthly credit/debit trend."""

from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.ledger_loading import load_entries
from src.domain.constants import DEFAULT_TREND_MONTHS
from src.domain.models import MonthlyTrendPoint
from src.domain.services.ledger import compute_monthly_trend
from src.domain.services.periods import month_bounds, shift_month
from src.infrastructure.logging.logger import get_app_logger


class GetMonthlyTrendUseCase:
    """Compute trailing monthly totals ending at a reference month."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        reference_date: date,
        months_back: int = DEFAULT_TREND_MONTHS,
        account_id: str | None = None,
    ) -> list[MonthlyTrendPoint]:
        """Return the trend points, oldest month first.

        Args:
            reference_date: Any day of the most recent month.
            months_back: Number of months, including the current one.
            account_id: Optional account to restrict the trend to.

        Returns:
            list[MonthlyTrendPoint]: Exactly ``months_back`` points.
        """
        if months_back < 1:
            raise ValueError(
                f"months_back must be at least 1, got {months_back}"
            )
        first_year, first_month = shift_month(
            reference_date.year,
            reference_date.month,
            -(months_back - 1),
        )
        start, _ = month_bounds(first_year, first_month)
        _, end = month_bounds(reference_date.year, reference_date.month)
        entries = load_entries(self._ledger_repository, start, end)
        points = compute_monthly_trend(
            entries,
            months_back,
            reference_date,
            account_id,
        )
        self._logger.info(
            f"Monthly trend computed for {months_back} months ending "
            f"{reference_date:%Y-%m}"
        )
        return points


__all__ = ["GetMonthlyTrendUseCase", "MonthlyTrendPoint"]
