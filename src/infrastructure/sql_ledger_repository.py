"""SQLAlchemy-backed repository for ledger data."""

from datetime import date

from sqlalchemy import Date, bindparam, text
from sqlalchemy.sql.elements import TextClause

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import (
    AccountRow,
    LedgerEntryRow,
    LedgerRepositoryPort,
    ReceivableRow,
)
from src.domain.services.normalization import parse_backend_date
from src.utils.money_utils import coerce_cents


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for ledger reads."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_accounts(self) -> list[AccountRow]:
        query = text(
            """
            SELECT id, name, account_number, account_type, balance, is_active
            FROM banks
            ORDER BY name, id
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [
            AccountRow(
                id=str(row.id),
                balance=coerce_cents(row.balance),
                is_active=bool(row.is_active),
                name=row.name or "",
                account_number=row.account_number,
                account_type=row.account_type,
            )
            for row in rows
        ]

    def fetch_ledger_entries(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[LedgerEntryRow]:
        base_sql = """
        SELECT t.id AS id,
               t.title AS title,
               t.amount AS amount,
               t.type AS kind,
               t.status AS status,
               t.transaction_date AS occurred_at,
               t.bank_id AS account_id,
               t.transfer_from_bank_id AS transfer_from_account_id,
               t.transfer_to_bank_id AS transfer_to_account_id,
               t.category_id AS category_id,
               c.name AS category_name
        FROM bank_transactions t
        LEFT JOIN financial_categories c ON c.id = t.category_id
        WHERE 1=1
        """
        query = self._with_date_filters(
            base_sql,
            "t.transaction_date",
            start_date,
            end_date,
            order_by="t.transaction_date, t.id",
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                query, self._build_date_params(start_date, end_date)
            ).all()
        return [
            LedgerEntryRow(
                id=str(row.id),
                kind=row.kind,
                amount=coerce_cents(row.amount),
                status=row.status,
                occurred_at=parse_backend_date(row.occurred_at),
                account_id=row.account_id,
                transfer_from_account_id=row.transfer_from_account_id,
                transfer_to_account_id=row.transfer_to_account_id,
                title=row.title or "",
                category_id=row.category_id,
                category_name=row.category_name,
            )
            for row in rows
        ]

    def fetch_receivables(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[ReceivableRow]:
        base_sql = """
        SELECT id, title, amount, type, status, due_date, category_id
        FROM financial_transactions
        WHERE 1=1
        """
        query = self._with_date_filters(
            base_sql,
            "due_date",
            start_date,
            end_date,
            order_by="due_date, id",
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                query, self._build_date_params(start_date, end_date)
            ).all()
        return [
            ReceivableRow(
                id=str(row.id),
                title=row.title or "",
                amount=coerce_cents(row.amount),
                type=row.type,
                status=row.status,
                due_date=parse_backend_date(row.due_date),
                category_id=row.category_id,
            )
            for row in rows
        ]

    @staticmethod
    def _with_date_filters(
        base_sql: str,
        column: str,
        start_date: date | None,
        end_date: date | None,
        order_by: str,
    ) -> TextClause:
        params = []
        if start_date:
            base_sql += f" AND {column} >= :start_date"
            params.append(bindparam("start_date", type_=Date))
        if end_date:
            base_sql += f" AND {column} <= :end_date"
            params.append(bindparam("end_date", type_=Date))
        base_sql += f" ORDER BY {order_by}"
        query = text(base_sql)
        if params:
            query = query.bindparams(*params)
        return query

    @staticmethod
    def _build_date_params(
        start_date: date | None,
        end_date: date | None,
    ) -> dict[str, date]:
        params: dict[str, date] = {}
        if start_date:
            params["start_date"] = start_date
        if end_date:
            params["end_date"] = end_date
        return params


__all__ = ["SqlAlchemyLedgerRepository"]
