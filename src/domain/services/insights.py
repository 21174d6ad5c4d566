"""Dashboard insights derived from the ledger.

These helpers feed the secondary dashboard cards: forecast versus
realized totals, category comparison, recent movements, the commitments
calendar and the financial alerts panel.
"""

from collections.abc import Iterable
from datetime import date, timedelta

from src.domain.constants import (
    CALENDAR_DAYS,
    CONFIRMED,
    DEFAULT_RECENT_ALERT_DAYS,
    DEFAULT_RECENT_ENTRIES,
    DEFAULT_TOP_CATEGORIES,
    OVERDUE,
    PENDING,
)
from src.domain.models.finance import (
    CalendarDay,
    CategoryComparison,
    FinancialAlerts,
    RealizationSummary,
)
from src.domain.models.ledger import Commitment, DebitEntry, LedgerEntry
from src.domain.services.ledger import (
    compare_values,
    directional_amounts,
    filter_by_account,
)
from src.domain.services.periods import (
    calendar_start,
    date_range,
    month_bounds,
    shift_month,
)
from src.domain.services.validation import validate_entries


def compute_realization(
    entries: Iterable[LedgerEntry],
    window_start: date,
    window_end: date,
    account_id: str | None = None,
) -> RealizationSummary:
    """Split window totals into confirmed and pending per direction.

    Args:
        entries: Ledger entries to aggregate.
        window_start: First day of the window (inclusive).
        window_end: Last day of the window (inclusive).
        account_id: Optional account to restrict the totals to.

    Returns:
        RealizationSummary: Confirmed and pending credit/debit totals.
    """
    entries = tuple(entries)
    validate_entries(entries)
    totals = {
        (CONFIRMED, "credit"): 0,
        (CONFIRMED, "debit"): 0,
        (PENDING, "credit"): 0,
        (PENDING, "debit"): 0,
    }
    for entry in entries:
        if entry.status not in (CONFIRMED, PENDING):
            continue
        if not window_start <= entry.occurred_at <= window_end:
            continue
        amounts = directional_amounts(entry, account_id)
        if amounts is None:
            continue
        credit, debit = amounts
        totals[(entry.status, "credit")] += credit
        totals[(entry.status, "debit")] += debit
    return RealizationSummary(
        credit_confirmed=totals[(CONFIRMED, "credit")],
        credit_pending=totals[(PENDING, "credit")],
        debit_confirmed=totals[(CONFIRMED, "debit")],
        debit_pending=totals[(PENDING, "debit")],
    )


def compare_categories(
    entries: Iterable[LedgerEntry],
    reference_date: date,
    account_id: str | None = None,
    limit: int = DEFAULT_TOP_CATEGORIES,
) -> list[CategoryComparison]:
    """Compare debit totals per category with the previous month.

    Args:
        entries: Ledger entries to aggregate.
        reference_date: Any day of the current month.
        account_id: Optional account to restrict the comparison to.
        limit: Maximum number of categories to return.

    Returns:
        list[CategoryComparison]: Categories sorted by current value,
        largest first.
    """
    entries = tuple(entries)
    validate_entries(entries)
    current_window = month_bounds(reference_date.year, reference_date.month)
    previous_window = month_bounds(
        *shift_month(reference_date.year, reference_date.month, -1)
    )
    current = _debits_by_category(entries, current_window, account_id)
    previous = _debits_by_category(entries, previous_window, account_id)

    names = list(current)
    names.extend(name for name in previous if name not in current)
    comparisons = [
        CategoryComparison(
            name=name,
            comparison=compare_values(
                current.get(name, 0),
                previous.get(name, 0),
            ),
        )
        for name in names
        if current.get(name, 0) > 0 or previous.get(name, 0) > 0
    ]
    comparisons.sort(
        key=lambda item: item.comparison.current_value,
        reverse=True,
    )
    return comparisons[:limit]


def recent_entries(
    entries: Iterable[LedgerEntry],
    window_start: date,
    window_end: date,
    account_id: str | None = None,
    limit: int = DEFAULT_RECENT_ENTRIES,
) -> list[LedgerEntry]:
    """Return the latest entries of the window, most recent first."""
    entries = tuple(entries)
    validate_entries(entries)
    in_window = [
        entry
        for entry in filter_by_account(entries, account_id)
        if window_start <= entry.occurred_at <= window_end
    ]
    in_window.sort(key=lambda entry: entry.occurred_at, reverse=True)
    return in_window[:limit]


def build_calendar(
    entries: Iterable[LedgerEntry],
    year: int,
    month: int,
    today: date,
    account_id: str | None = None,
) -> list[CalendarDay]:
    """Build a six-week calendar grid for a month.

    The grid starts on the Sunday on or before the first day of the month
    and always holds 42 days.

    Args:
        entries: Ledger entries to place on the grid.
        year: Calendar year to display.
        month: Calendar month to display.
        today: Current calendar day, used to flag the today cell.
        account_id: Optional account to restrict the grid to.

    Returns:
        list[CalendarDay]: 42 consecutive days.

    Raises:
        LedgerValidationError: If an entry is malformed.
    """
    entries = tuple(entries)
    validate_entries(entries)
    start = calendar_start(year, month)
    grid = date_range(start, start + timedelta(days=CALENDAR_DAYS - 1))
    end = grid[-1]
    by_day: dict[date, list[LedgerEntry]] = {}
    for entry in filter_by_account(entries, account_id):
        if start <= entry.occurred_at <= end:
            by_day.setdefault(entry.occurred_at, []).append(entry)
    return [
        CalendarDay(
            day=day,
            entries=by_day.get(day, []),
            is_current_month=day.month == month,
            is_today=day == today,
        )
        for day in grid
    ]


def compute_financial_alerts(
    commitments: Iterable[Commitment],
    today: date,
    recent_days: int = DEFAULT_RECENT_ALERT_DAYS,
    recent_limit: int = DEFAULT_RECENT_ENTRIES,
) -> FinancialAlerts:
    """Group commitments from both ledgers into alert buckets.

    Args:
        commitments: Commitments already resolved at ingestion.
        today: Current calendar day.
        recent_days: Size of the recent window in days.
        recent_limit: Maximum number of recent commitments.

    Returns:
        FinancialAlerts: Overdue, pending and recent commitments.
    """
    overdue: list[Commitment] = []
    pending: list[Commitment] = []
    recent: list[Commitment] = []
    recent_start = today - timedelta(days=recent_days)
    for commitment in commitments:
        if commitment.status == OVERDUE or (
            commitment.status == PENDING and commitment.due_date < today
        ):
            overdue.append(commitment)
        elif commitment.status == PENDING:
            pending.append(commitment)
        if (
            recent_start <= commitment.due_date <= today
            and len(recent) < recent_limit
        ):
            recent.append(commitment)
    return FinancialAlerts(overdue=overdue, pending=pending, recent=recent)


def _debits_by_category(
    entries: Iterable[LedgerEntry],
    window: tuple[date, date],
    account_id: str | None,
) -> dict[str, int]:
    window_start, window_end = window
    totals: dict[str, int] = {}
    for entry in entries:
        if not isinstance(entry, DebitEntry) or not entry.category_name:
            continue
        if account_id is not None and entry.account_id != account_id:
            continue
        if not window_start <= entry.occurred_at <= window_end:
            continue
        totals[entry.category_name] = (
            totals.get(entry.category_name, 0) + entry.amount
        )
    return totals


__all__ = [
    "compute_realization",
    "compare_categories",
    "recent_entries",
    "build_calendar",
    "compute_financial_alerts",
]
