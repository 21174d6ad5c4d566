"""Domain services package."""

from .ingestion import (
    commitment_from_entry,
    commitments_from_entries,
    to_account,
    to_commitment,
    to_ledger_entries,
    to_ledger_entry,
)
from .insights import (
    build_calendar,
    compare_categories,
    compute_financial_alerts,
    compute_realization,
    recent_entries,
)
from .ledger import (
    bucket_commitments,
    compare_to_previous_month,
    compare_values,
    compute_monthly_trend,
    compute_period_summary,
    compute_real_balances,
    directional_amounts,
    filter_by_account,
    percent_variation,
)
from .normalization import normalize_code, parse_backend_date
from .periods import (
    calendar_start,
    date_range,
    month_bounds,
    month_label,
    shift_month,
)
from .validation import (
    validate_entries,
    validate_entry,
    warn_negative_balances,
)

__all__ = [
    "bucket_commitments",
    "compare_to_previous_month",
    "compare_values",
    "compute_monthly_trend",
    "compute_period_summary",
    "compute_real_balances",
    "directional_amounts",
    "filter_by_account",
    "percent_variation",
    "build_calendar",
    "compare_categories",
    "compute_financial_alerts",
    "compute_realization",
    "recent_entries",
    "commitment_from_entry",
    "commitments_from_entries",
    "to_account",
    "to_commitment",
    "to_ledger_entries",
    "to_ledger_entry",
    "normalize_code",
    "parse_backend_date",
    "calendar_start",
    "date_range",
    "month_bounds",
    "month_label",
    "shift_month",
    "validate_entries",
    "validate_entry",
    "warn_negative_balances",
]
