"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date

import altair as alt
import streamlit as st

from src.adapters.interface.streamlit.dashboard_presenter import (
    ALL_ACCOUNTS,
    account_options,
    balance_rows,
    calendar_rows,
    category_rows,
    commitment_rows,
    entry_rows,
    format_variation,
    realization_rows,
    trend_chart_rows,
    variation_bar_width,
)
from src.domain.exceptions import LedgerError
from src.domain.models import (
    CalendarDay,
    DashboardView,
    FinancialAlerts,
    MonthlyTrendPoint,
)
from src.domain.services.periods import month_label
from src.infrastructure.container import (
    build_dashboard_use_case,
    build_financial_alerts_use_case,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.utils.money_utils import format_currency

REFRESH_SECONDS = 300


def _fetch_dashboard(
    reference_date: date,
    account_id: str | None,
) -> DashboardView:
    """Fetch the dashboard view for a reference date and selection."""
    use_case = build_dashboard_use_case()
    return use_case.execute(reference_date, account_id=account_id)


@st.cache_data(show_spinner=False, ttl=REFRESH_SECONDS)
def _load_dashboard(
    reference_date: date,
    account_id: str | None,
    schema_version: int = 1,
) -> DashboardView:
    """Cached wrapper around _fetch_dashboard."""
    _ = schema_version
    return _fetch_dashboard(reference_date, account_id)


def _fetch_alerts(today: date) -> FinancialAlerts:
    """Fetch commitment alerts from both ledgers."""
    use_case = build_financial_alerts_use_case()
    return use_case.execute(today)


@st.cache_data(show_spinner=False, ttl=REFRESH_SECONDS)
def _load_alerts(today: date) -> FinancialAlerts:
    """Cached wrapper around _fetch_alerts."""
    return _fetch_alerts(today)


def _render_metrics(view: DashboardView) -> None:
    """Render the headline balance and month totals."""
    balance_col, credit_col, debit_col, pending_col = st.columns(4)
    balance_col.metric(
        "Saldo total",
        format_currency(view.balances.total),
    )
    credit_col.metric(
        "Receitas do mês",
        format_currency(view.summary.total_credit),
        format_variation(view.comparison.receivable),
    )
    debit_col.metric(
        "Despesas do mês",
        format_currency(view.summary.total_debit),
        format_variation(view.comparison.payable),
        delta_color="inverse",
    )
    pending_col.metric(
        "Pendente",
        format_currency(view.summary.total_pending),
    )


def _render_trend_chart(points: Sequence[MonthlyTrendPoint]) -> None:
    """Render grouped monthly credit/debit bars."""
    st.subheader("Fluxo mensal")
    data = trend_chart_rows(points)
    if not data:
        st.info("Sem movimentações no período.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X(
            "month:N",
            sort=alt.EncodingSortField(field="order", order="ascending"),
            title=None,
        ),
        xOffset="series:N",
        y=alt.Y("amount:Q", title="R$"),
        color=alt.Color(
            "series:N",
            scale=alt.Scale(range=["#2e7d32", "#e76f51"]),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("month:N"),
            alt.Tooltip("series:N"),
            alt.Tooltip("amount_label:N"),
        ],
    )
    st.altair_chart(chart, use_container_width=True)


def _render_comparison(view: DashboardView) -> None:
    """Render the month-over-month comparison card."""
    st.subheader("Comparativo com o mês anterior")
    receivable_col, payable_col = st.columns(2)
    for column, label, result in (
        (receivable_col, "Receitas", view.comparison.receivable),
        (payable_col, "Despesas", view.comparison.payable),
    ):
        column.metric(
            label,
            format_currency(result.current_value),
            format_variation(result),
        )
        column.caption(
            f"Mês anterior: {format_currency(result.previous_value)}"
        )
        column.progress(int(variation_bar_width(result)))
    if view.top_categories:
        st.dataframe(
            category_rows(view.top_categories),
            use_container_width=True,
            hide_index=True,
        )


def _render_commitments(view: DashboardView) -> None:
    """Render the due-today and overdue commitment lists."""
    today_col, overdue_col = st.columns(2)
    with today_col:
        st.subheader("Compromissos de hoje")
        st.caption(
            f"Você possui {len(view.commitments.due_today)} "
            f"compromisso(s) para hoje"
        )
        if view.commitments.due_today:
            st.dataframe(
                entry_rows(view.commitments.due_today, limit=3),
                use_container_width=True,
                hide_index=True,
            )
    with overdue_col:
        st.subheader("Compromissos em atraso")
        st.caption(
            f"Você possui {len(view.commitments.overdue)} "
            f"compromisso(s) em atraso"
        )
        if view.commitments.overdue:
            st.dataframe(
                entry_rows(view.commitments.overdue, limit=3),
                use_container_width=True,
                hide_index=True,
            )


def _render_calendar(
    days: Sequence[CalendarDay],
    reference_date: date,
) -> None:
    """Render the monthly entries calendar as a week grid."""
    label = month_label(reference_date.year, reference_date.month)
    st.subheader(f"Calendário de {label}")
    st.caption("▲ receitas  ▼ despesas  [ ] hoje")
    st.dataframe(
        calendar_rows(days),
        use_container_width=True,
        hide_index=True,
    )


def _render_alerts(alerts: FinancialAlerts) -> None:
    """Render the financial alerts panel."""
    st.subheader("Alertas financeiros")
    if alerts.is_clear:
        st.success("Nenhuma pendência financeira.")
    if alerts.overdue:
        st.error(
            f"{len(alerts.overdue)} compromisso(s) em atraso, total "
            f"{format_currency(alerts.total_overdue)}"
        )
    if alerts.pending:
        st.warning(
            f"{len(alerts.pending)} compromisso(s) pendente(s), total "
            f"{format_currency(alerts.total_pending)}"
        )
    if alerts.recent:
        st.caption("Movimentações recentes")
        st.dataframe(
            commitment_rows(alerts.recent),
            use_container_width=True,
            hide_index=True,
        )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Ledger Dashboard", layout="wide")
    st.title("Dashboard Financeiro")

    today = date.today()
    try:
        overview = _load_dashboard(today, None)
    except LedgerError as exc:
        st.error(f"Não foi possível carregar os dados do dashboard: {exc}")
        return

    options = account_options(overview.balances)
    selected = st.sidebar.selectbox(
        "Banco",
        options=list(options),
        format_func=options.get,
    )
    account_id = None if selected == ALL_ACCOUNTS else selected
    get_usage_logger().info(f"Dashboard viewed: account={selected}")

    view = overview
    if account_id is not None:
        try:
            view = _load_dashboard(today, account_id)
        except LedgerError as exc:
            st.error(f"Não foi possível carregar o banco selecionado: {exc}")
            return

    if not view.balances.accounts:
        st.warning("Nenhum banco cadastrado.")
        return

    _render_metrics(view)
    _render_trend_chart(view.trend)
    _render_comparison(view)
    st.subheader("Previsto / Realizado")
    st.dataframe(
        realization_rows(view.realization),
        use_container_width=True,
        hide_index=True,
    )
    _render_commitments(view)
    _render_calendar(view.calendar, view.reference_date)
    st.subheader("Saldos por banco")
    st.dataframe(
        balance_rows(view.balances),
        use_container_width=True,
        hide_index=True,
    )
    st.subheader("Transações recentes")
    st.dataframe(
        entry_rows(view.recent_entries),
        use_container_width=True,
        hide_index=True,
    )
    try:
        _render_alerts(_load_alerts(today))
    except LedgerError as exc:
        st.warning(f"Alertas indisponíveis: {exc}")


if __name__ == "__main__":  # pragma: no cover
    main()
