"""Domain package for ledger rules and core models."""

from .constants import ENTRY_KINDS, ENTRY_STATUSES
from .exceptions import LedgerApiError, LedgerError, LedgerValidationError
from .models import (
    Account,
    Commitment,
    CreditEntry,
    DebitEntry,
    DerivedAccountBalance,
    LedgerEntry,
    MonthlyTrendPoint,
    PeriodSummary,
    TransferEntry,
)
from .services import (
    bucket_commitments,
    compare_to_previous_month,
    compute_monthly_trend,
    compute_period_summary,
    compute_real_balances,
    percent_variation,
)

__all__ = [
    "Account",
    "Commitment",
    "CreditEntry",
    "DebitEntry",
    "DerivedAccountBalance",
    "LedgerEntry",
    "MonthlyTrendPoint",
    "PeriodSummary",
    "TransferEntry",
    "ENTRY_KINDS",
    "ENTRY_STATUSES",
    "LedgerError",
    "LedgerApiError",
    "LedgerValidationError",
    "bucket_commitments",
    "compare_to_previous_month",
    "compute_monthly_trend",
    "compute_period_summary",
    "compute_real_balances",
    "percent_variation",
]
