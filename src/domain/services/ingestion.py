"""Resolve raw repository rows into the ledger tagged union.

Rows are flat records whose meaning depends on their ``kind``. This module
is the only place where that flat shape is inspected; everything
downstream works on ``CreditEntry``, ``DebitEntry``, ``TransferEntry`` and
``Commitment`` values.
"""

from collections.abc import Iterable

from src.domain.constants import (
    ACCOUNTS_RECEIVABLE_LEDGER,
    BANK_LEDGER,
    CANCELLED,
    COMMITMENT_STATUSES,
    CONFIRMED,
    CREDIT,
    DEBIT,
    PAID,
    PAYABLE,
    PENDING,
    RECEIVABLE,
    TRANSFER,
)
from src.domain.exceptions import LedgerValidationError
from src.domain.models.ledger import (
    Account,
    Commitment,
    CreditEntry,
    DebitEntry,
    LedgerEntry,
    TransferEntry,
)
from src.domain.models.ledger_rows import (
    AccountRow,
    LedgerEntryRow,
    ReceivableRow,
)
from src.domain.services.normalization import normalize_code
from src.domain.services.validation import validate_entry

_BANK_TO_COMMITMENT_STATUS = {
    PENDING: PENDING,
    CONFIRMED: PAID,
    CANCELLED: CANCELLED,
}


def to_account(row: AccountRow) -> Account:
    """Build an account snapshot from a repository row."""
    return Account(
        id=row.id,
        opening_balance=int(row.balance),
        is_active=bool(row.is_active),
        name=row.name,
        account_number=row.account_number,
        account_type=row.account_type,
    )


def to_ledger_entry(row: LedgerEntryRow) -> LedgerEntry:
    """Resolve a flat ledger row into its tagged variant.

    Transfer rows keep only their two legs; a stray ``account_id`` on a
    transfer row is dropped so it can never be matched as a third account.

    Args:
        row: Raw ledger row from a repository.

    Returns:
        LedgerEntry: Validated credit, debit or transfer entry.

    Raises:
        LedgerValidationError: If the row does not describe a well-formed
            entry of its kind.
    """
    kind = normalize_code(row.kind)
    status = normalize_code(row.status) or ""
    common = {
        "id": row.id,
        "amount": int(row.amount),
        "status": status,
        "occurred_at": row.occurred_at,
        "title": row.title or "",
        "category_id": row.category_id,
        "category_name": row.category_name,
    }
    if kind == TRANSFER:
        if not row.transfer_from_account_id or not row.transfer_to_account_id:
            raise LedgerValidationError(
                row.id, "transfer requires both account legs"
            )
        entry: LedgerEntry = TransferEntry(
            from_account_id=row.transfer_from_account_id,
            to_account_id=row.transfer_to_account_id,
            **common,
        )
    elif kind in (CREDIT, DEBIT):
        if row.transfer_from_account_id or row.transfer_to_account_id:
            raise LedgerValidationError(
                row.id, f"{kind} must not carry transfer legs"
            )
        if not row.account_id:
            raise LedgerValidationError(row.id, f"{kind} requires an account")
        variant = CreditEntry if kind == CREDIT else DebitEntry
        entry = variant(account_id=row.account_id, **common)
    else:
        raise LedgerValidationError(row.id, f"unknown kind {row.kind!r}")
    validate_entry(entry)
    return entry


def to_ledger_entries(rows: Iterable[LedgerEntryRow]) -> list[LedgerEntry]:
    """Resolve every row, rejecting the whole batch on the first error."""
    return [to_ledger_entry(row) for row in rows]


def to_commitment(row: ReceivableRow) -> Commitment:
    """Build a commitment from an accounts receivable/payable row.

    Raises:
        LedgerValidationError: If the type or status is unknown or the
            amount is negative.
    """
    record_type = normalize_code(row.type)
    status = normalize_code(row.status)
    if record_type not in (RECEIVABLE, PAYABLE):
        raise LedgerValidationError(row.id, f"unknown type {row.type!r}")
    if status not in COMMITMENT_STATUSES:
        raise LedgerValidationError(row.id, f"unknown status {row.status!r}")
    amount = int(row.amount)
    if amount < 0:
        raise LedgerValidationError(row.id, "amount must not be negative")
    return Commitment(
        source=ACCOUNTS_RECEIVABLE_LEDGER,
        id=row.id,
        title=row.title or "",
        amount=amount,
        direction="IN" if record_type == RECEIVABLE else "OUT",
        status=status,
        due_date=row.due_date,
    )


def commitment_from_entry(entry: LedgerEntry) -> Commitment | None:
    """Return the commitment view of a bank entry, or None for transfers."""
    if isinstance(entry, TransferEntry):
        return None
    return Commitment(
        source=BANK_LEDGER,
        id=entry.id,
        title=entry.title,
        amount=entry.amount,
        direction="IN" if isinstance(entry, CreditEntry) else "OUT",
        status=_BANK_TO_COMMITMENT_STATUS[entry.status],
        due_date=entry.occurred_at,
    )


def commitments_from_entries(
    entries: Iterable[LedgerEntry],
) -> list[Commitment]:
    """Return commitments for every credit and debit entry."""
    commitments = []
    for entry in entries:
        commitment = commitment_from_entry(entry)
        if commitment is not None:
            commitments.append(commitment)
    return commitments


__all__ = [
    "to_account",
    "to_ledger_entry",
    "to_ledger_entries",
    "to_commitment",
    "commitment_from_entry",
    "commitments_from_entries",
]
