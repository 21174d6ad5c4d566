"""Application ports package."""

from .database import DatabaseEnginePort
from .ledger_repository import (
    AccountRow,
    LedgerEntryRow,
    LedgerRepositoryPort,
    ReceivableRow,
)

__all__ = [
    "AccountRow",
    "DatabaseEnginePort",
    "LedgerEntryRow",
    "LedgerRepositoryPort",
    "ReceivableRow",
]
