"""CLI adapter printing the ledger dashboard for a reference date.

Reads ``REPORT_DATE`` (YYYY-MM-DD, defaults to today) and
``REPORT_ACCOUNT_ID`` (optional) from the environment.
"""

from datetime import date
import os

from src.domain.exceptions import LedgerError
from src.infrastructure.container import build_dashboard_use_case
from src.infrastructure.logging.logger import get_app_logger
from src.utils.money_utils import format_currency


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def main() -> None:
    """Compute the dashboard and print its headline figures."""
    logger = get_app_logger()
    reference_date = (
        _parse_date(os.getenv("REPORT_DATE"), logger) or date.today()
    )
    account_id = os.getenv("REPORT_ACCOUNT_ID") or None

    use_case = build_dashboard_use_case()
    try:
        view = use_case.execute(reference_date, account_id=account_id)
    except LedgerError as exc:
        logger.error(str(exc))
        return

    print(
        f"Dashboard (date={reference_date}, account={account_id or 'all'})"
    )
    for account, balance in zip(
        view.balances.accounts,
        view.balances.balances,
    ):
        print(
            f"  {account.name or account.id}: "
            f"{format_currency(balance.real_balance)}"
        )
    print(f"Total balance: {format_currency(view.balances.total)}")
    print(
        f"Month: credit={format_currency(view.summary.total_credit)}, "
        f"debit={format_currency(view.summary.total_debit)}, "
        f"confirmed={format_currency(view.summary.total_confirmed)}, "
        f"pending={format_currency(view.summary.total_pending)}"
    )
    receivable = view.comparison.receivable
    payable = view.comparison.payable
    print(
        f"Vs previous month: receivable {receivable.percent_variation:+.2f}%, "
        f"payable {payable.percent_variation:+.2f}%"
    )
    for point in view.trend:
        print(
            f"  {point.label}: credit={format_currency(point.total_credit)}, "
            f"debit={format_currency(point.total_debit)}"
        )
    print(
        f"Commitments: due_today={len(view.commitments.due_today)}, "
        f"overdue={len(view.commitments.overdue)}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
