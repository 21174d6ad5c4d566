"""Domain validation helpers for ledger entries."""

from collections.abc import Iterable
from logging import Logger

from src.domain.constants import ENTRY_STATUSES
from src.domain.exceptions import LedgerValidationError
from src.domain.models.finance import DerivedAccountBalance
from src.domain.models.ledger import (
    Account,
    CreditEntry,
    DebitEntry,
    LedgerEntry,
    TransferEntry,
)


def validate_entry(entry: LedgerEntry) -> None:
    """Reject a ledger entry that violates its preconditions.

    Args:
        entry: Entry to validate.

    Raises:
        LedgerValidationError: If the object is not a ledger entry or
            breaks one of its preconditions.
    """
    if not isinstance(entry, (CreditEntry, DebitEntry, TransferEntry)):
        raise LedgerValidationError(
            getattr(entry, "id", None),
            f"unsupported ledger entry type {type(entry).__name__}",
        )
    if entry.amount < 0:
        raise LedgerValidationError(entry.id, "amount must not be negative")
    if entry.status not in ENTRY_STATUSES:
        raise LedgerValidationError(
            entry.id, f"unknown status {entry.status!r}"
        )
    if isinstance(entry, TransferEntry):
        if not entry.from_account_id or not entry.to_account_id:
            raise LedgerValidationError(
                entry.id, "transfer requires both account legs"
            )
        if entry.from_account_id == entry.to_account_id:
            raise LedgerValidationError(
                entry.id, "transfer legs must reference different accounts"
            )
        return
    if not entry.account_id:
        raise LedgerValidationError(
            entry.id, f"{entry.kind} requires an account"
        )


def validate_entries(entries: Iterable[LedgerEntry]) -> None:
    """Validate every entry, stopping at the first violation."""
    for entry in entries:
        validate_entry(entry)


def warn_negative_balances(
    accounts: Iterable[Account],
    balances: Iterable[DerivedAccountBalance],
    logger: Logger,
    overdraft_types: Iterable[str] = ("CREDIT",),
) -> None:
    """Warn when a non-credit account ends with a negative real balance.

    Args:
        accounts: Accounts the balances were computed for.
        balances: Derived balances, one per account.
        logger: Logger used for warnings.
        overdraft_types: Account types allowed to go negative.
    """
    allowed = tuple(overdraft_types)
    for account, balance in zip(accounts, balances):
        if account.account_type in allowed:
            continue
        if balance.real_balance < 0:
            logger.warning(
                f"Real balance is negative for account={account.id}: "
                f"{balance.real_balance}"
            )


__all__ = ["validate_entry", "validate_entries", "warn_negative_balances"]
