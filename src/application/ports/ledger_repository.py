"""Application port for ledger data access."""

from datetime import date
from typing import Protocol

from src.domain.models import AccountRow, LedgerEntryRow, ReceivableRow


class LedgerRepositoryPort(Protocol):
    """Port exposing read access to accounts and their ledgers."""

    def fetch_accounts(self) -> list[AccountRow]:
        """Return every bank account with its opening balance."""

    def fetch_ledger_entries(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[LedgerEntryRow]:
        """Return bank ledger rows, optionally bounded by date."""

    def fetch_receivables(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[ReceivableRow]:
        """Return accounts receivable/payable rows by due date."""


__all__ = [
    "LedgerRepositoryPort",
    "AccountRow",
    "LedgerEntryRow",
    "ReceivableRow",
]
