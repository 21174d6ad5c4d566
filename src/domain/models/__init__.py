"""Domain models package."""

from .finance import (
    AccountBalancesView,
    CalendarDay,
    CategoryComparison,
    CommitmentBuckets,
    ComparisonResult,
    DashboardView,
    DerivedAccountBalance,
    FinancialAlerts,
    MonthComparison,
    MonthlyTrendPoint,
    PeriodSummary,
    RealizationSummary,
)
from .ledger import (
    Account,
    Commitment,
    CreditEntry,
    DebitEntry,
    LedgerEntry,
    TransferEntry,
)
from .ledger_rows import AccountRow, LedgerEntryRow, ReceivableRow

__all__ = [
    "Account",
    "Commitment",
    "CreditEntry",
    "DebitEntry",
    "LedgerEntry",
    "TransferEntry",
    "AccountRow",
    "LedgerEntryRow",
    "ReceivableRow",
    "AccountBalancesView",
    "CalendarDay",
    "CategoryComparison",
    "CommitmentBuckets",
    "ComparisonResult",
    "DashboardView",
    "DerivedAccountBalance",
    "FinancialAlerts",
    "MonthComparison",
    "MonthlyTrendPoint",
    "PeriodSummary",
    "RealizationSummary",
]
