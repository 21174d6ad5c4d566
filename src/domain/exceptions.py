"""Domain exceptions for ledger processing."""


class LedgerError(Exception):
    """Base exception for the ledger dashboard."""


class LedgerValidationError(LedgerError):
    """A ledger record violates its structural preconditions."""

    def __init__(self, entry_id: str | None, reason: str) -> None:
        self.entry_id = entry_id
        self.reason = reason
        super().__init__(f"Invalid ledger entry {entry_id!r}: {reason}")


class LedgerApiError(LedgerError):
    """The remote ledger API failed or returned an unusable payload."""


__all__ = ["LedgerError", "LedgerValidationError", "LedgerApiError"]
