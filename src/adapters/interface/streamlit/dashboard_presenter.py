"""Dashboard presentation logic for the Streamlit UI.

Pure transformations from a ``DashboardView`` to the rows, labels and
chart data the Streamlit page renders. No IO and no Streamlit calls here.
"""

from collections.abc import Sequence

from src.domain.models import (
    AccountBalancesView,
    CalendarDay,
    CategoryComparison,
    Commitment,
    ComparisonResult,
    LedgerEntry,
    MonthlyTrendPoint,
    RealizationSummary,
)
from src.domain.models.ledger import TransferEntry
from src.utils.money_utils import format_currency

ALL_ACCOUNTS = "all"
CREDIT_SERIES = "Receitas"
DEBIT_SERIES = "Despesas"

KIND_LABELS = {
    "CREDIT": "Crédito",
    "DEBIT": "Débito",
    "TRANSFER": "Transferência",
}

STATUS_LABELS = {
    "PENDING": "Pendente",
    "CONFIRMED": "Confirmado",
    "CANCELLED": "Cancelado",
    "PAID": "Pago",
    "OVERDUE": "Atrasado",
}

SOURCE_LABELS = {
    "ACCOUNTS_RECEIVABLE_LEDGER": "Financeiro",
    "BANK_LEDGER": "Banco",
}

WEEKDAY_LABELS = ("Dom", "Seg", "Ter", "Qua", "Qui", "Sex", "Sáb")


def format_variation(result: ComparisonResult) -> str:
    """Format a percent variation, using ``--`` for no change."""
    variation = result.percent_variation
    if variation == 0:
        return "--"
    sign = "+" if variation > 0 else ""
    return f"{sign}{variation:.2f}%"


def variation_bar_width(result: ComparisonResult) -> float:
    """Return the progress-bar width (0-100) for a variation."""
    return min(abs(result.percent_variation), 100.0)


def account_options(view: AccountBalancesView) -> dict[str, str]:
    """Map selector values to labels, starting with the all-accounts entry."""
    options = {ALL_ACCOUNTS: "Todos os bancos"}
    for account, balance in zip(view.accounts, view.balances):
        options[account.id] = (
            f"{account.name or account.id} "
            f"({format_currency(balance.real_balance)})"
        )
    return options


def balance_rows(view: AccountBalancesView) -> list[dict[str, str]]:
    """Return table rows for the account balances panel."""
    return [
        {
            "Banco": account.name or account.id,
            "Conta": account.account_number or "—",
            "Saldo inicial": format_currency(balance.opening_balance),
            "Saldo real": format_currency(balance.real_balance),
            "Ativo": "Sim" if account.is_active else "Não",
        }
        for account, balance in zip(view.accounts, view.balances)
    ]


def trend_chart_rows(
    points: Sequence[MonthlyTrendPoint],
) -> list[dict[str, str | float | int]]:
    """Return Altair-ready rows with one record per month and series."""
    rows: list[dict[str, str | float | int]] = []
    for index, point in enumerate(points):
        for series, amount in (
            (CREDIT_SERIES, point.total_credit),
            (DEBIT_SERIES, point.total_debit),
        ):
            rows.append(
                {
                    "month": point.label,
                    "order": index,
                    "series": series,
                    "amount": amount / 100,
                    "amount_label": format_currency(amount),
                }
            )
    return rows


def realization_rows(summary: RealizationSummary) -> list[dict[str, str]]:
    """Return forecast versus realized rows for both directions."""
    return [
        {
            "Tipo": CREDIT_SERIES,
            "Previsto": format_currency(summary.credit_forecast),
            "Realizado": format_currency(summary.credit_confirmed),
            "Pendente": format_currency(summary.credit_pending),
            "%": f"{summary.credit_realized_percent}%",
        },
        {
            "Tipo": DEBIT_SERIES,
            "Previsto": format_currency(summary.debit_forecast),
            "Realizado": format_currency(summary.debit_confirmed),
            "Pendente": format_currency(summary.debit_pending),
            "%": f"{summary.debit_realized_percent}%",
        },
    ]


def category_rows(
    categories: Sequence[CategoryComparison],
) -> list[dict[str, str]]:
    return [
        {
            "Categoria": item.name,
            "Mês atual": format_currency(item.comparison.current_value),
            "Mês anterior": format_currency(item.comparison.previous_value),
            "Variação": format_variation(item.comparison),
        }
        for item in categories
    ]


def entry_rows(
    entries: Sequence[LedgerEntry],
    limit: int | None = None,
) -> list[dict[str, str]]:
    """Return table rows describing ledger entries."""
    selected = list(entries if limit is None else entries[:limit])
    rows = []
    for entry in selected:
        if isinstance(entry, TransferEntry):
            accounts = f"{entry.from_account_id} → {entry.to_account_id}"
        else:
            accounts = entry.account_id
        rows.append(
            {
                "Data": entry.occurred_at.strftime("%d/%m/%Y"),
                "Título": entry.title or entry.id,
                "Tipo": KIND_LABELS.get(entry.kind, entry.kind),
                "Status": STATUS_LABELS.get(entry.status, entry.status),
                "Conta": accounts,
                "Valor": format_currency(entry.amount),
            }
        )
    return rows


def _calendar_cell(cell: CalendarDay) -> str:
    if cell.is_current_month:
        label = str(cell.day.day)
    else:
        label = cell.day.strftime("%d/%m")
    if cell.has_credits:
        label += " ▲"
    if cell.has_debits:
        label += " ▼"
    if cell.is_today:
        label = f"[{label}]"
    return label


def calendar_rows(days: Sequence[CalendarDay]) -> list[dict[str, str]]:
    """Fold the calendar grid into one row per week.

    Days outside the displayed month carry their month (``02/11``),
    credits are marked with ``▲``, debits with ``▼`` and today is
    bracketed.
    """
    rows = []
    for start in range(0, len(days), len(WEEKDAY_LABELS)):
        week = days[start:start + len(WEEKDAY_LABELS)]
        rows.append(
            {
                label: _calendar_cell(cell)
                for label, cell in zip(WEEKDAY_LABELS, week)
            }
        )
    return rows


def commitment_rows(
    commitments: Sequence[Commitment],
) -> list[dict[str, str]]:
    """Return table rows for commitments from either ledger."""
    return [
        {
            "Vencimento": item.due_date.strftime("%d/%m/%Y"),
            "Título": item.title or item.id,
            "Origem": SOURCE_LABELS.get(item.source, item.source),
            "Status": STATUS_LABELS.get(item.status, item.status),
            "Valor": format_currency(
                item.amount if item.direction == "IN" else -item.amount
            ),
        }
        for item in commitments
    ]


__all__ = [
    "ALL_ACCOUNTS",
    "format_variation",
    "variation_bar_width",
    "account_options",
    "balance_rows",
    "trend_chart_rows",
    "realization_rows",
    "category_rows",
    "entry_rows",
    "calendar_rows",
    "commitment_rows",
]
