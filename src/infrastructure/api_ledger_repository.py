"""HTTP repository reading accounts and ledgers from the remote API."""

from datetime import date
from typing import Any

import httpx

from src.application.ports.ledger_repository import (
    AccountRow,
    LedgerEntryRow,
    LedgerRepositoryPort,
    ReceivableRow,
)
from src.domain.exceptions import LedgerApiError
from src.domain.services.normalization import parse_backend_date
from src.utils.money_utils import coerce_cents


class ApiLedgerRepository(LedgerRepositoryPort):
    """Repository backed by the ledger REST API."""

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            base_url: API base URL, e.g. ``http://localhost:3000/api``.
            token: Optional bearer token attached to every request.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport override.
        """
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = timeout
        self._transport = transport

    def fetch_accounts(self) -> list[AccountRow]:
        payload = self._get("/bancos")
        try:
            return [
                AccountRow(
                    id=str(item["id"]),
                    balance=coerce_cents(item.get("balance")),
                    is_active=bool(item.get("isActive", True)),
                    name=item.get("name") or "",
                    account_number=item.get("accountNumber"),
                    account_type=item.get("accountType"),
                )
                for item in self._unwrap(payload)
            ]
        except (KeyError, ValueError, TypeError) as e:
            raise LedgerApiError(f"Invalid bank data from API: {e}") from e

    def fetch_ledger_entries(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[LedgerEntryRow]:
        params = {"all": "true"}
        params.update(self._date_params(start_date, end_date))
        payload = self._get("/bancos/transactions", params)
        try:
            return [self._to_entry_row(item) for item in self._unwrap(payload)]
        except (KeyError, ValueError, TypeError) as e:
            raise LedgerApiError(
                f"Invalid bank transaction data from API: {e}"
            ) from e

    def fetch_receivables(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[ReceivableRow]:
        payload = self._get(
            "/financeiro/transactions",
            self._date_params(start_date, end_date),
        )
        try:
            return [
                ReceivableRow(
                    id=str(item["id"]),
                    title=item.get("title") or "",
                    amount=coerce_cents(item["amount"]),
                    type=item["type"],
                    status=item["status"],
                    due_date=parse_backend_date(item["dueDate"]),
                    category_id=item.get("categoryId"),
                )
                for item in self._unwrap(payload)
            ]
        except (KeyError, ValueError, TypeError) as e:
            raise LedgerApiError(
                f"Invalid financial transaction data from API: {e}"
            ) from e

    def _get(self, path: str, params: dict[str, str] | None = None) -> Any:
        """Issue a GET request and return the decoded JSON body.

        Raises:
            LedgerApiError: On timeout, transport or HTTP errors, or when
                the body is not JSON.
        """
        headers = {"Content-Type": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        with httpx.Client(
            base_url=self._base_url,
            headers=headers,
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            try:
                response = client.get(path, params=params)
                response.raise_for_status()
                return response.json()
            except httpx.TimeoutException as e:
                raise LedgerApiError(
                    f"Ledger API timeout after {self._timeout}s on {path}"
                ) from e
            except httpx.HTTPStatusError as e:
                raise LedgerApiError(
                    f"Ledger API error on {path}: {e.response.status_code}"
                ) from e
            except httpx.RequestError as e:
                raise LedgerApiError(
                    f"Ledger API unreachable on {path}: {e}"
                ) from e
            except ValueError as e:
                raise LedgerApiError(
                    f"Ledger API returned invalid JSON on {path}"
                ) from e

    @staticmethod
    def _unwrap(payload: Any) -> list[dict[str, Any]]:
        """Return the record list from a bare or paginated payload."""
        if isinstance(payload, list):
            return payload
        if isinstance(payload, dict) and isinstance(payload.get("data"), list):
            return payload["data"]
        raise TypeError(f"unexpected payload shape: {type(payload).__name__}")

    @staticmethod
    def _to_entry_row(item: dict[str, Any]) -> LedgerEntryRow:
        category = item.get("category") or {}
        return LedgerEntryRow(
            id=str(item["id"]),
            kind=item["type"],
            amount=coerce_cents(item["amount"]),
            status=item["status"],
            occurred_at=parse_backend_date(item["transactionDate"]),
            account_id=item.get("bankId"),
            transfer_from_account_id=item.get("transferFromBankId"),
            transfer_to_account_id=item.get("transferToBankId"),
            title=item.get("title") or "",
            category_id=item.get("categoryId"),
            category_name=category.get("name"),
        )

    @staticmethod
    def _date_params(
        start_date: date | None,
        end_date: date | None,
    ) -> dict[str, str]:
        params: dict[str, str] = {}
        if start_date:
            params["startDate"] = start_date.isoformat()
        if end_date:
            params["endDate"] = end_date.isoformat()
        return params


__all__ = ["ApiLedgerRepository"]
