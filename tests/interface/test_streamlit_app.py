"""Tests for the Streamlit app module."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from src.adapters.interface.streamlit import app
from src.application.use_cases.get_dashboard import GetDashboardUseCase
from src.domain.exceptions import LedgerApiError
from src.domain.models import (
    AccountRow,
    Commitment,
    FinancialAlerts,
    LedgerEntryRow,
)

TODAY = date(2026, 10, 19)


def _view(account_id=None, accounts=True):
    repository = MagicMock()
    repository.fetch_accounts.return_value = (
        [AccountRow(id="a", balance=100_000, is_active=True, name="Itaú")]
        if accounts
        else []
    )
    repository.fetch_ledger_entries.return_value = [
        LedgerEntryRow(
            id="d1",
            kind="DEBIT",
            amount=1_000,
            status="PENDING",
            occurred_at=TODAY,
            account_id="a",
            category_name="Mercado",
        )
    ]
    return GetDashboardUseCase(repository, logger=MagicMock()).execute(
        TODAY,
        account_id=account_id,
    )


def _fake_streamlit(selected: str = "all") -> MagicMock:
    fake_st = MagicMock()
    fake_st.columns.side_effect = lambda count: [
        MagicMock() for _ in range(count)
    ]
    fake_st.sidebar.selectbox.return_value = selected
    return fake_st


@pytest.fixture()
def usage_logger(monkeypatch) -> MagicMock:
    logger = MagicMock()
    monkeypatch.setattr(app, "get_usage_logger", lambda: logger)
    return logger


def test_fetch_dashboard_invokes_use_case(monkeypatch):
    """_fetch_dashboard should build the use case and execute it."""
    calls = []

    class _FakeUseCase:
        def execute(self, reference_date, account_id=None):
            calls.append((reference_date, account_id))
            return "view"

    monkeypatch.setattr(app, "build_dashboard_use_case", _FakeUseCase)

    assert app._fetch_dashboard(TODAY, "a") == "view"
    assert calls == [(TODAY, "a")]


def test_load_dashboard_uses_fetch(monkeypatch):
    """The cached loader should delegate to _fetch_dashboard."""
    app._load_dashboard.clear()
    monkeypatch.setattr(
        app,
        "_fetch_dashboard",
        lambda reference_date, account_id: ("cached", account_id),
    )

    assert app._load_dashboard(TODAY, "b") == ("cached", "b")


def test_main_renders_dashboard(monkeypatch, usage_logger):
    """main should render charts and tables for the combined view."""
    fake_st = _fake_streamlit()
    loaded = []

    def fake_load(reference_date, account_id):
        loaded.append(account_id)
        return _view(account_id)

    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_dashboard", fake_load)
    monkeypatch.setattr(
        app,
        "_load_alerts",
        lambda today: FinancialAlerts(overdue=[], pending=[], recent=[]),
    )

    app.main()

    assert loaded == [None]
    fake_st.set_page_config.assert_called_once()
    fake_st.altair_chart.assert_called_once()
    fake_st.success.assert_called_once()
    fake_st.error.assert_not_called()
    options = fake_st.sidebar.selectbox.call_args.kwargs["options"]
    assert options == ["all", "a"]
    table_payloads = [call.args[0] for call in fake_st.dataframe.call_args_list]
    assert any(
        rows and rows[0].get("Banco") == "Itaú" for rows in table_payloads
    )
    calendar = next(
        rows for rows in table_payloads if rows and "Dom" in rows[0]
    )
    assert len(calendar) == 6
    assert calendar[3]["Seg"] == "[19 ▼]"
    usage_logger.info.assert_called_once_with(
        "Dashboard viewed: account=all"
    )


def test_main_reloads_for_selected_account(monkeypatch, usage_logger):
    fake_st = _fake_streamlit(selected="a")
    loaded = []

    def fake_load(reference_date, account_id):
        loaded.append(account_id)
        return _view(account_id)

    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_dashboard", fake_load)
    monkeypatch.setattr(
        app,
        "_load_alerts",
        lambda today: FinancialAlerts(overdue=[], pending=[], recent=[]),
    )

    app.main()

    assert loaded == [None, "a"]


def test_main_reports_backend_errors(monkeypatch, usage_logger):
    """main should show an error instead of raising on API failures."""
    fake_st = _fake_streamlit()

    def failing_load(reference_date, account_id):
        raise LedgerApiError("Ledger API error on /bancos: 500")

    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_dashboard", failing_load)

    app.main()

    fake_st.error.assert_called_once()
    assert "500" in fake_st.error.call_args.args[0]
    fake_st.altair_chart.assert_not_called()


def test_main_warns_when_no_accounts(monkeypatch, usage_logger):
    """main should warn the user when no bank is registered."""
    fake_st = _fake_streamlit()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app,
        "_load_dashboard",
        lambda reference_date, account_id: _view(accounts=False),
    )

    app.main()

    fake_st.warning.assert_called_once_with("Nenhum banco cadastrado.")
    fake_st.altair_chart.assert_not_called()


def test_render_alerts_lists_recent_commitments(monkeypatch):
    """Recent commitments are tabulated below the alert banners."""
    fake_st = _fake_streamlit()
    monkeypatch.setattr(app, "st", fake_st)
    overdue = Commitment(
        source="ACCOUNTS_RECEIVABLE_LEDGER",
        id="r1",
        title="Cliente",
        amount=5_000,
        direction="IN",
        status="OVERDUE",
        due_date=date(2026, 10, 15),
    )

    app._render_alerts(
        FinancialAlerts(overdue=[overdue], pending=[], recent=[overdue])
    )

    fake_st.success.assert_not_called()
    assert "R$ 50,00" in fake_st.error.call_args.args[0]
    rows = fake_st.dataframe.call_args.args[0]
    assert rows[0]["Título"] == "Cliente"
    assert rows[0]["Status"] == "Atrasado"
