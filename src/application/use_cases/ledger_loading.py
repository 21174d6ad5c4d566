"""Shared loading helpers for ledger use cases."""

from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import Account, Commitment, LedgerEntry
from src.domain.services.ingestion import (
    to_account,
    to_commitment,
    to_ledger_entries,
)


def load_accounts(
    repository: LedgerRepositoryPort,
    include_inactive: bool = True,
) -> list[Account]:
    """Fetch account rows and convert them to domain accounts.

    Args:
        repository: Port providing ledger data.
        include_inactive: Whether inactive accounts are kept.

    Returns:
        list[Account]: Accounts in repository order.
    """
    accounts = [to_account(row) for row in repository.fetch_accounts()]
    if include_inactive:
        return accounts
    return [account for account in accounts if account.is_active]


def load_entries(
    repository: LedgerRepositoryPort,
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[LedgerEntry]:
    """Fetch ledger rows and resolve them into tagged entries."""
    rows = repository.fetch_ledger_entries(start_date, end_date)
    return to_ledger_entries(rows)


def load_receivables(
    repository: LedgerRepositoryPort,
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[Commitment]:
    """Fetch receivable/payable rows as commitments."""
    rows = repository.fetch_receivables(start_date, end_date)
    return [to_commitment(row) for row in rows]


__all__ = ["load_accounts", "load_entries", "load_receivables"]
