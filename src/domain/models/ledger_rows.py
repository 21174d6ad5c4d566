"""Raw ledger rows returned by repositories before ingestion."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class AccountRow:
    """Row representing a bank account as stored by the backend."""

    id: str
    balance: int
    is_active: bool
    name: str
    account_number: str | None = None
    account_type: str | None = None


@dataclass(frozen=True)
class LedgerEntryRow:
    """Flat row representing a bank ledger movement.

    Transfer rows carry the two legs in ``transfer_from_account_id`` and
    ``transfer_to_account_id``; credit and debit rows use ``account_id``.
    """

    id: str
    kind: str
    amount: int
    status: str
    occurred_at: date
    account_id: str | None = None
    transfer_from_account_id: str | None = None
    transfer_to_account_id: str | None = None
    title: str = ""
    category_id: str | None = None
    category_name: str | None = None


@dataclass(frozen=True)
class ReceivableRow:
    """Row representing an accounts receivable/payable record."""

    id: str
    title: str
    amount: int
    type: str
    status: str
    due_date: date
    category_id: str | None = None


__all__ = ["AccountRow", "LedgerEntryRow", "ReceivableRow"]
