"""Balance and ledger aggregation over in-memory account data.

Every function here is pure: inputs are never mutated and the reference
date is always passed in. Credits and debits are matched through their
single ``account_id``; transfers are matched through their two legs only.
The two matching paths never share a predicate.
"""

from collections.abc import Iterable, Sequence
from datetime import date

from src.domain.constants import CONFIRMED, PENDING
from src.domain.models.finance import (
    CommitmentBuckets,
    ComparisonResult,
    DerivedAccountBalance,
    MonthComparison,
    MonthlyTrendPoint,
    PeriodSummary,
)
from src.domain.models.ledger import (
    Account,
    CreditEntry,
    DebitEntry,
    LedgerEntry,
    TransferEntry,
)
from src.domain.services.periods import month_bounds, month_label, shift_month
from src.domain.services.validation import validate_entries


def compute_real_balances(
    accounts: Sequence[Account],
    entries: Iterable[LedgerEntry],
) -> list[DerivedAccountBalance]:
    """Compute the real balance of each account.

    Args:
        accounts: Accounts to report, in display order.
        entries: Every known ledger entry.

    Returns:
        list[DerivedAccountBalance]: One balance per account, in the same
        order as ``accounts``.

    Raises:
        LedgerValidationError: If any entry is malformed.
    """
    entries = tuple(entries)
    validate_entries(entries)
    movements: dict[str, int] = {}

    for entry in entries:
        if isinstance(entry, CreditEntry):
            movements[entry.account_id] = (
                movements.get(entry.account_id, 0) + entry.amount
            )
        elif isinstance(entry, DebitEntry):
            movements[entry.account_id] = (
                movements.get(entry.account_id, 0) - entry.amount
            )

    for entry in entries:
        if not isinstance(entry, TransferEntry):
            continue
        movements[entry.from_account_id] = (
            movements.get(entry.from_account_id, 0) - entry.amount
        )
        movements[entry.to_account_id] = (
            movements.get(entry.to_account_id, 0) + entry.amount
        )

    return [
        DerivedAccountBalance(
            account_id=account.id,
            opening_balance=account.opening_balance,
            real_balance=account.opening_balance
            + movements.get(account.id, 0),
        )
        for account in accounts
    ]


def compute_period_summary(
    entries: Iterable[LedgerEntry],
    window_start: date,
    window_end: date,
    account_id: str | None = None,
) -> PeriodSummary:
    """Aggregate credits, debits and statuses inside a date window.

    Without ``account_id`` transfers are left out: both legs belong to the
    same owner and cancel each other. With ``account_id`` a transfer counts
    as a credit on its destination leg and a debit on its source leg.

    Args:
        entries: Ledger entries to aggregate.
        window_start: First day of the window (inclusive).
        window_end: Last day of the window (inclusive).
        account_id: Optional account to restrict the summary to.

    Returns:
        PeriodSummary: Totals for the window.
    """
    entries = tuple(entries)
    validate_entries(entries)
    return _summarize(entries, window_start, window_end, account_id)


def compute_monthly_trend(
    entries: Iterable[LedgerEntry],
    months_back: int,
    reference_date: date,
    account_id: str | None = None,
) -> list[MonthlyTrendPoint]:
    """Return one trend point per month, oldest first.

    Args:
        entries: Ledger entries to aggregate.
        months_back: Number of months to report, including the current one.
        reference_date: Any day of the most recent month.
        account_id: Optional account to restrict the trend to.

    Returns:
        list[MonthlyTrendPoint]: Exactly ``months_back`` points.

    Raises:
        ValueError: If ``months_back`` is lower than 1.
    """
    if months_back < 1:
        raise ValueError(f"months_back must be at least 1, got {months_back}")
    entries = tuple(entries)
    validate_entries(entries)
    points = []
    for offset in range(months_back - 1, -1, -1):
        year, month = shift_month(
            reference_date.year, reference_date.month, -offset
        )
        start, end = month_bounds(year, month)
        summary = _summarize(entries, start, end, account_id)
        points.append(
            MonthlyTrendPoint(
                label=month_label(year, month),
                year=year,
                month=month,
                total_credit=summary.total_credit,
                total_debit=summary.total_debit,
            )
        )
    return points


def percent_variation(current: int, previous: int) -> float:
    """Return the percentage change from ``previous`` to ``current``.

    A zero baseline yields 100 when the current value is positive and 0
    otherwise, so the result is always finite.
    """
    if previous > 0:
        return (current - previous) / previous * 100
    return 100.0 if current > 0 else 0.0


def compare_values(current: int, previous: int) -> ComparisonResult:
    """Build a comparison result for two period values."""
    return ComparisonResult(
        current_value=current,
        previous_value=previous,
        percent_variation=percent_variation(current, previous),
    )


def compare_to_previous_month(
    entries: Iterable[LedgerEntry],
    reference_date: date,
    account_id: str | None = None,
) -> MonthComparison:
    """Compare credit and debit totals with the previous calendar month.

    Args:
        entries: Ledger entries to aggregate.
        reference_date: Any day of the current month.
        account_id: Optional account to restrict the comparison to.

    Returns:
        MonthComparison: Receivable (credit) and payable (debit) results.
    """
    entries = tuple(entries)
    validate_entries(entries)
    current_start, current_end = month_bounds(
        reference_date.year, reference_date.month
    )
    previous_start, previous_end = month_bounds(
        *shift_month(reference_date.year, reference_date.month, -1)
    )
    current = _summarize(entries, current_start, current_end, account_id)
    previous = _summarize(entries, previous_start, previous_end, account_id)
    return MonthComparison(
        receivable=compare_values(current.total_credit, previous.total_credit),
        payable=compare_values(current.total_debit, previous.total_debit),
    )


def bucket_commitments(
    entries: Iterable[LedgerEntry],
    today: date,
    account_id: str | None = None,
) -> CommitmentBuckets:
    """Split pending entries into due-today and overdue buckets.

    Args:
        entries: Ledger entries to inspect.
        today: Current calendar day.
        account_id: Optional account to restrict the buckets to.

    Returns:
        CommitmentBuckets: Pending entries dated today and before today.
    """
    entries = tuple(entries)
    validate_entries(entries)
    due_today: list[LedgerEntry] = []
    overdue: list[LedgerEntry] = []
    for entry in filter_by_account(entries, account_id):
        if entry.status != PENDING:
            continue
        if entry.occurred_at == today:
            due_today.append(entry)
        elif entry.occurred_at < today:
            overdue.append(entry)
    return CommitmentBuckets(due_today=due_today, overdue=overdue)


def filter_by_account(
    entries: Iterable[LedgerEntry],
    account_id: str | None,
) -> list[LedgerEntry]:
    """Return entries touching an account, or all entries when None."""
    if account_id is None:
        return list(entries)
    return [entry for entry in entries if entry.touches(account_id)]


def directional_amounts(
    entry: LedgerEntry,
    account_id: str | None,
) -> tuple[int, int] | None:
    """Return the (credit, debit) contribution of an entry.

    Args:
        entry: Entry to evaluate.
        account_id: Selected account, or None for the combined view.

    Returns:
        tuple[int, int] | None: Inflow and outflow amounts, or None when
        the entry does not contribute to the selected view.
    """
    if isinstance(entry, TransferEntry):
        if account_id is None:
            return None
        if entry.to_account_id == account_id:
            return entry.amount, 0
        if entry.from_account_id == account_id:
            return 0, entry.amount
        return None
    if account_id is not None and entry.account_id != account_id:
        return None
    if isinstance(entry, CreditEntry):
        return entry.amount, 0
    return 0, entry.amount


def _summarize(
    entries: Sequence[LedgerEntry],
    window_start: date,
    window_end: date,
    account_id: str | None,
) -> PeriodSummary:
    total_credit = 0
    total_debit = 0
    total_confirmed = 0
    total_pending = 0
    count = 0
    for entry in entries:
        if not window_start <= entry.occurred_at <= window_end:
            continue
        amounts = directional_amounts(entry, account_id)
        if amounts is None:
            continue
        credit, debit = amounts
        total_credit += credit
        total_debit += debit
        if entry.status == CONFIRMED:
            total_confirmed += credit + debit
        elif entry.status == PENDING:
            total_pending += credit + debit
        count += 1
    return PeriodSummary(
        total_credit=total_credit,
        total_debit=total_debit,
        total_confirmed=total_confirmed,
        total_pending=total_pending,
        count=count,
    )


__all__ = [
    "compute_real_balances",
    "compute_period_summary",
    "compute_monthly_trend",
    "percent_variation",
    "compare_values",
    "compare_to_previous_month",
    "bucket_commitments",
    "filter_by_account",
    "directional_amounts",
]
