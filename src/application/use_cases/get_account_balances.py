"""Use case to compute real balances for bank accounts."""

from collections.abc import Sequence

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.ledger_loading import (
    load_accounts,
    load_entries,
)
from src.domain.models import (
    Account,
    AccountBalancesView,
    DerivedAccountBalance,
    LedgerEntry,
)
from src.domain.services.ledger import compute_real_balances
from src.domain.services.validation import warn_negative_balances
from src.infrastructure.logging.logger import get_app_logger


class GetAccountBalancesUseCase:
    """Compute account real balances from the full ledger."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing accounts and ledger rows.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        account_id: str | None = None,
        include_inactive: bool = True,
    ) -> AccountBalancesView:
        """Return real balances and the total for the selection.

        Args:
            account_id: Optional account whose balance is the total.
            include_inactive: Whether inactive accounts are listed.

        Returns:
            AccountBalancesView: Balances in account order plus the total.
        """
        accounts = load_accounts(self._ledger_repository, include_inactive)
        entries = load_entries(self._ledger_repository)
        self._logger.info(
            f"Fetched {len(accounts)} accounts and {len(entries)} ledger "
            f"entries"
        )
        return build_balances_view(accounts, entries, account_id, self._logger)


def build_balances_view(
    accounts: Sequence[Account],
    entries: Sequence[LedgerEntry],
    account_id: str | None,
    logger,
) -> AccountBalancesView:
    """Compute balances and the selected total for already loaded data.

    Args:
        accounts: Accounts to report.
        entries: Full ledger.
        account_id: Optional selected account.
        logger: Logger used for warnings.

    Returns:
        AccountBalancesView: Balances with the total for the selection.
    """
    balances = compute_real_balances(accounts, entries)
    warn_negative_balances(accounts, balances, logger)
    total = _selected_total(balances, account_id, logger)
    logger.info(f"Real balances computed: total={total}")
    return AccountBalancesView(
        accounts=list(accounts),
        balances=balances,
        total=total,
    )


def _selected_total(
    balances: Sequence[DerivedAccountBalance],
    account_id: str | None,
    logger,
) -> int:
    if account_id is None:
        return sum(balance.real_balance for balance in balances)
    for balance in balances:
        if balance.account_id == account_id:
            return balance.real_balance
    logger.warning(f"Selected account not found: {account_id}")
    return 0


__all__ = [
    "GetAccountBalancesUseCase",
    "AccountBalancesView",
    "build_balances_view",
]
