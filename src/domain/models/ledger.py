"""Domain models for bank accounts and ledger entries.

Ledger entries form a tagged union: each movement kind is its own frozen
dataclass so that a transfer can never be read through a single-account
field. Raw repository rows are resolved into these types once, at
ingestion time.
"""

from dataclasses import dataclass
from datetime import date
from typing import Literal, Union

from src.domain.constants import (
    ACCOUNTS_RECEIVABLE_LEDGER,
    BANK_LEDGER,
    CREDIT,
    DEBIT,
    TRANSFER,
)


@dataclass(frozen=True)
class Account:
    """Bank account snapshot supplied by the host application.

    Attributes:
        id: Opaque account identifier.
        opening_balance: Opening balance in cents.
        is_active: Whether the account is active.
        name: Display name.
        account_number: Display account number.
        account_type: CHECKING, SAVINGS, INVESTMENT or CREDIT.
    """

    id: str
    opening_balance: int
    is_active: bool = True
    name: str = ""
    account_number: str | None = None
    account_type: str | None = None


@dataclass(frozen=True, kw_only=True)
class _BaseEntry:
    id: str
    amount: int
    status: str
    occurred_at: date
    title: str = ""
    category_id: str | None = None
    category_name: str | None = None

    @property
    def ledger(self) -> str:
        return BANK_LEDGER


@dataclass(frozen=True, kw_only=True)
class CreditEntry(_BaseEntry):
    """Money entering a single account."""

    account_id: str

    @property
    def kind(self) -> str:
        return CREDIT

    def touches(self, account_id: str) -> bool:
        return self.account_id == account_id


@dataclass(frozen=True, kw_only=True)
class DebitEntry(_BaseEntry):
    """Money leaving a single account."""

    account_id: str

    @property
    def kind(self) -> str:
        return DEBIT

    def touches(self, account_id: str) -> bool:
        return self.account_id == account_id


@dataclass(frozen=True, kw_only=True)
class TransferEntry(_BaseEntry):
    """Money moving between two owned accounts, stored once."""

    from_account_id: str
    to_account_id: str

    @property
    def kind(self) -> str:
        return TRANSFER

    def touches(self, account_id: str) -> bool:
        return account_id in (self.from_account_id, self.to_account_id)


LedgerEntry = Union[CreditEntry, DebitEntry, TransferEntry]


@dataclass(frozen=True)
class Commitment:
    """Pending or settled obligation from either ledger.

    Attributes:
        source: ACCOUNTS_RECEIVABLE_LEDGER or BANK_LEDGER.
        id: Identifier of the source record.
        title: Display title.
        amount: Amount in cents.
        direction: IN for receivables and credits, OUT otherwise.
        status: PENDING, PAID, OVERDUE or CANCELLED.
        due_date: Due date (transaction date for bank entries).
    """

    source: Literal["ACCOUNTS_RECEIVABLE_LEDGER", "BANK_LEDGER"]
    id: str
    title: str
    amount: int
    direction: Literal["IN", "OUT"]
    status: str
    due_date: date

    @property
    def is_receivable_ledger(self) -> bool:
        return self.source == ACCOUNTS_RECEIVABLE_LEDGER


__all__ = [
    "Account",
    "CreditEntry",
    "DebitEntry",
    "TransferEntry",
    "LedgerEntry",
    "Commitment",
]
