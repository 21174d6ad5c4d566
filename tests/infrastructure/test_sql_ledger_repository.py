"""Tests for the SQLAlchemy ledger repository against SQLite."""

from datetime import date

import pytest
from sqlalchemy import create_engine, text

from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.sql_ledger_repository import (
    SqlAlchemyLedgerRepository,
)

SCHEMA = (
    """
    CREATE TABLE banks (
        id TEXT PRIMARY KEY,
        name TEXT,
        account_number TEXT,
        account_type TEXT,
        balance INTEGER,
        is_active BOOLEAN
    )
    """,
    """
    CREATE TABLE financial_categories (id TEXT PRIMARY KEY, name TEXT)
    """,
    """
    CREATE TABLE bank_transactions (
        id TEXT PRIMARY KEY,
        title TEXT,
        amount INTEGER,
        type TEXT,
        status TEXT,
        transaction_date DATE,
        bank_id TEXT,
        transfer_from_bank_id TEXT,
        transfer_to_bank_id TEXT,
        category_id TEXT
    )
    """,
    """
    CREATE TABLE financial_transactions (
        id TEXT PRIMARY KEY,
        title TEXT,
        amount INTEGER,
        type TEXT,
        status TEXT,
        due_date DATE,
        category_id TEXT
    )
    """,
)


@pytest.fixture()
def repository(tmp_path) -> SqlAlchemyLedgerRepository:
    engine = create_engine(f"sqlite:///{tmp_path / 'ledger.db'}")
    with engine.begin() as conn:
        for statement in SCHEMA:
            conn.execute(text(statement))
        conn.execute(
            text(
                "INSERT INTO banks VALUES "
                "('b', 'Nubank', NULL, 'CHECKING', 0, 1), "
                "('a', 'Itaú', '1234-5', 'CHECKING', 100000, 1), "
                "('c', 'Cartão', NULL, 'CREDIT', -5000, 0)"
            )
        )
        conn.execute(
            text("INSERT INTO financial_categories VALUES ('cat', 'Mercado')")
        )
        conn.execute(
            text(
                "INSERT INTO bank_transactions VALUES "
                "('t1', 'Reserva', 30000, 'TRANSFER', 'CONFIRMED', "
                "'2026-10-06', 'a', 'a', 'b', NULL), "
                "('d1', 'Feira', 8000, 'DEBIT', 'PENDING', "
                "'2026-10-19', 'b', NULL, NULL, 'cat'), "
                "('c1', 'Salário', 50000, 'CREDIT', 'CONFIRMED', "
                "'2026-09-05', 'a', NULL, NULL, NULL)"
            )
        )
        conn.execute(
            text(
                "INSERT INTO financial_transactions VALUES "
                "('r1', 'Cliente', 5000, 'RECEIVABLE', 'PENDING', "
                "'2026-10-25', NULL), "
                "('p1', 'Aluguel', 3000, 'PAYABLE', 'OVERDUE', "
                "'2026-09-30', 'cat')"
            )
        )
    adapter = SqlAlchemyDatabaseEngineAdapter(engine=engine)
    yield SqlAlchemyLedgerRepository(adapter)
    engine.dispose()


def test_fetch_accounts_orders_by_name(repository) -> None:
    rows = repository.fetch_accounts()

    assert [row.name for row in rows] == ["Cartão", "Itaú", "Nubank"]
    assert rows[1].balance == 100_000
    assert rows[1].account_number == "1234-5"
    assert rows[0].is_active is False


def test_fetch_ledger_entries_returns_all_rows(repository) -> None:
    rows = repository.fetch_ledger_entries()

    assert [row.id for row in rows] == ["c1", "t1", "d1"]
    transfer = rows[1]
    assert transfer.kind == "TRANSFER"
    assert transfer.transfer_from_account_id == "a"
    assert transfer.transfer_to_account_id == "b"
    assert transfer.occurred_at == date(2026, 10, 6)
    assert rows[2].category_name == "Mercado"
    assert rows[0].category_name is None


def test_fetch_ledger_entries_filters_by_dates(repository) -> None:
    rows = repository.fetch_ledger_entries(
        date(2026, 10, 1),
        date(2026, 10, 18),
    )

    assert [row.id for row in rows] == ["t1"]


def test_fetch_receivables_filters_by_start_date(repository) -> None:
    rows = repository.fetch_receivables(start_date=date(2026, 10, 1))

    assert [row.id for row in rows] == ["r1"]
    assert rows[0].due_date == date(2026, 10, 25)
    assert rows[0].type == "RECEIVABLE"


def test_fetch_receivables_without_filters(repository) -> None:
    rows = repository.fetch_receivables()

    assert [row.id for row in rows] == ["p1", "r1"]
    assert rows[0].category_id == "cat"
