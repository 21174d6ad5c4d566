"""Domain models for derived ledger aggregates."""

from dataclasses import dataclass, field
from datetime import date

from src.domain.constants import CREDIT, DEBIT
from src.domain.models.ledger import Account, Commitment, LedgerEntry


@dataclass(frozen=True)
class DerivedAccountBalance:
    """Real balance of an account derived from its ledger.

    Attributes:
        account_id: Account identifier.
        opening_balance: Opening balance in cents.
        real_balance: Opening balance plus the net effect of all entries.
    """

    account_id: str
    opening_balance: int
    real_balance: int

    @property
    def movement(self) -> int:
        """Return the net ledger effect on the account."""
        return self.real_balance - self.opening_balance


@dataclass(frozen=True)
class PeriodSummary:
    """Totals over a bounded date window."""

    total_credit: int
    total_debit: int
    total_confirmed: int
    total_pending: int
    count: int

    @property
    def net(self) -> int:
        """Return total_credit minus total_debit."""
        return self.total_credit - self.total_debit


@dataclass(frozen=True)
class MonthlyTrendPoint:
    """Credit and debit totals for one calendar month."""

    label: str
    year: int
    month: int
    total_credit: int
    total_debit: int

    @property
    def net(self) -> int:
        return self.total_credit - self.total_debit


@dataclass(frozen=True)
class ComparisonResult:
    """Current value compared with the previous period."""

    current_value: int
    previous_value: int
    percent_variation: float

    @property
    def difference(self) -> int:
        return self.current_value - self.previous_value


@dataclass(frozen=True)
class MonthComparison:
    """Receivable and payable comparisons against the previous month."""

    receivable: ComparisonResult
    payable: ComparisonResult


@dataclass(frozen=True)
class CommitmentBuckets:
    """Pending entries due today or already overdue."""

    due_today: list[LedgerEntry]
    overdue: list[LedgerEntry]


@dataclass(frozen=True)
class RealizationSummary:
    """Forecast versus realized totals per direction.

    Attributes:
        credit_confirmed: Confirmed credits in the window.
        credit_pending: Pending credits in the window.
        debit_confirmed: Confirmed debits in the window.
        debit_pending: Pending debits in the window.
    """

    credit_confirmed: int
    credit_pending: int
    debit_confirmed: int
    debit_pending: int

    @property
    def credit_forecast(self) -> int:
        return self.credit_confirmed + self.credit_pending

    @property
    def debit_forecast(self) -> int:
        return self.debit_confirmed + self.debit_pending

    @property
    def credit_realized_percent(self) -> int:
        return _realized_percent(self.credit_confirmed, self.credit_forecast)

    @property
    def debit_realized_percent(self) -> int:
        return _realized_percent(self.debit_confirmed, self.debit_forecast)


@dataclass(frozen=True)
class CategoryComparison:
    """Debit totals of one category in the current and previous month."""

    name: str
    comparison: ComparisonResult


@dataclass(frozen=True)
class CalendarDay:
    """One cell of the monthly commitments calendar."""

    day: date
    entries: list[LedgerEntry]
    is_current_month: bool
    is_today: bool

    @property
    def has_credits(self) -> bool:
        return any(entry.kind == CREDIT for entry in self.entries)

    @property
    def has_debits(self) -> bool:
        return any(entry.kind == DEBIT for entry in self.entries)


@dataclass(frozen=True)
class FinancialAlerts:
    """Overdue, pending and recent commitments across both ledgers."""

    overdue: list[Commitment]
    pending: list[Commitment]
    recent: list[Commitment]

    @property
    def total_overdue(self) -> int:
        return sum(item.amount for item in self.overdue)

    @property
    def total_pending(self) -> int:
        return sum(item.amount for item in self.pending)

    @property
    def is_clear(self) -> bool:
        return not self.overdue and not self.pending


@dataclass(frozen=True)
class AccountBalancesView:
    """Real balances for display with the selected total."""

    accounts: list[Account]
    balances: list[DerivedAccountBalance]
    total: int


@dataclass(frozen=True)
class DashboardView:
    """Everything the dashboard renders for one reference date."""

    reference_date: date
    account_id: str | None
    balances: AccountBalancesView
    summary: PeriodSummary
    trend: list[MonthlyTrendPoint]
    comparison: MonthComparison
    commitments: CommitmentBuckets
    realization: RealizationSummary
    top_categories: list[CategoryComparison] = field(default_factory=list)
    recent_entries: list[LedgerEntry] = field(default_factory=list)
    calendar: list[CalendarDay] = field(default_factory=list)


def _realized_percent(confirmed: int, forecast: int) -> int:
    if forecast <= 0:
        return 0
    return round(confirmed / forecast * 100)


__all__ = [
    "DerivedAccountBalance",
    "PeriodSummary",
    "MonthlyTrendPoint",
    "ComparisonResult",
    "MonthComparison",
    "CommitmentBuckets",
    "RealizationSummary",
    "CategoryComparison",
    "CalendarDay",
    "FinancialAlerts",
    "AccountBalancesView",
    "DashboardView",
]
