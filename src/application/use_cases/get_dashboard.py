"""Use case to assemble the dashboard view-model."""

from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.get_account_balances import (
    build_balances_view,
)
from src.application.use_cases.ledger_loading import (
    load_accounts,
    load_entries,
)
from src.domain.constants import DEFAULT_TREND_MONTHS
from src.domain.models import DashboardView
from src.domain.services.insights import (
    build_calendar,
    compare_categories,
    compute_realization,
    recent_entries,
)
from src.domain.services.ledger import (
    bucket_commitments,
    compare_to_previous_month,
    compute_monthly_trend,
    compute_period_summary,
)
from src.domain.services.periods import month_bounds
from src.infrastructure.logging.logger import get_app_logger


class GetDashboardUseCase:
    """Derive every dashboard card from one snapshot of the ledger."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        trend_months: int = DEFAULT_TREND_MONTHS,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing accounts and ledger rows.
            logger: Optional logger compatible with logging.Logger-like API.
            trend_months: Number of months shown in the trend chart.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._trend_months = trend_months

    def execute(
        self,
        reference_date: date,
        account_id: str | None = None,
        calendar_month: tuple[int, int] | None = None,
    ) -> DashboardView:
        """Return the dashboard for a reference date and selection.

        Args:
            reference_date: Current day; its month is the current period.
            account_id: Optional selected account, None for all accounts.
            calendar_month: Optional (year, month) shown in the calendar,
                defaults to the reference month.

        Returns:
            DashboardView: Balances, summaries, trend and commitments.
        """
        accounts = load_accounts(self._ledger_repository)
        entries = load_entries(self._ledger_repository)
        self._logger.info(
            f"Dashboard snapshot: {len(accounts)} accounts, "
            f"{len(entries)} entries, account={account_id or 'all'}"
        )

        month_start, month_end = month_bounds(
            reference_date.year, reference_date.month
        )
        calendar_year, calendar_month_number = calendar_month or (
            reference_date.year,
            reference_date.month,
        )
        view = DashboardView(
            reference_date=reference_date,
            account_id=account_id,
            balances=build_balances_view(
                accounts, entries, account_id, self._logger
            ),
            summary=compute_period_summary(
                entries, month_start, month_end, account_id
            ),
            trend=compute_monthly_trend(
                entries, self._trend_months, reference_date, account_id
            ),
            comparison=compare_to_previous_month(
                entries, reference_date, account_id
            ),
            commitments=bucket_commitments(
                entries, reference_date, account_id
            ),
            realization=compute_realization(
                entries, month_start, month_end, account_id
            ),
            top_categories=compare_categories(
                entries, reference_date, account_id
            ),
            recent_entries=recent_entries(
                entries, month_start, month_end, account_id
            ),
            calendar=build_calendar(
                entries,
                calendar_year,
                calendar_month_number,
                reference_date,
                account_id,
            ),
        )
        self._logger.info(
            f"Dashboard computed: credit={view.summary.total_credit}, "
            f"debit={view.summary.total_debit}, "
            f"due_today={len(view.commitments.due_today)}, "
            f"overdue={len(view.commitments.overdue)}"
        )
        return view


__all__ = ["GetDashboardUseCase", "DashboardView"]
