"""Domain constants for ledger analytics."""

CREDIT = "CREDIT"
DEBIT = "DEBIT"
TRANSFER = "TRANSFER"

ENTRY_KINDS = (CREDIT, DEBIT, TRANSFER)

PENDING = "PENDING"
CONFIRMED = "CONFIRMED"
CANCELLED = "CANCELLED"

ENTRY_STATUSES = (PENDING, CONFIRMED, CANCELLED)

BANK_LEDGER = "BANK_LEDGER"
ACCOUNTS_RECEIVABLE_LEDGER = "ACCOUNTS_RECEIVABLE_LEDGER"

RECEIVABLE = "RECEIVABLE"
PAYABLE = "PAYABLE"

PAID = "PAID"
OVERDUE = "OVERDUE"

COMMITMENT_STATUSES = (PENDING, PAID, OVERDUE, CANCELLED)

DEFAULT_TREND_MONTHS = 3
DEFAULT_TOP_CATEGORIES = 4
DEFAULT_RECENT_ENTRIES = 5
DEFAULT_RECENT_ALERT_DAYS = 7
CALENDAR_DAYS = 42

MONTH_ABBREVIATIONS = (
    "jan",
    "fev",
    "mar",
    "abr",
    "mai",
    "jun",
    "jul",
    "ago",
    "set",
    "out",
    "nov",
    "dez",
)


__all__ = [
    "CREDIT",
    "DEBIT",
    "TRANSFER",
    "ENTRY_KINDS",
    "PENDING",
    "CONFIRMED",
    "CANCELLED",
    "ENTRY_STATUSES",
    "BANK_LEDGER",
    "ACCOUNTS_RECEIVABLE_LEDGER",
    "RECEIVABLE",
    "PAYABLE",
    "PAID",
    "OVERDUE",
    "COMMITMENT_STATUSES",
    "DEFAULT_TREND_MONTHS",
    "DEFAULT_TOP_CATEGORIES",
    "DEFAULT_RECENT_ENTRIES",
    "DEFAULT_RECENT_ALERT_DAYS",
    "CALENDAR_DAYS",
    "MONTH_ABBREVIATIONS",
]
