"""API methods related to transactions (invoices, credit memos and payments)."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from lockstep_sdk.clients.helpers import query_options, record_path
from lockstep_sdk.schemas.transactions import TransactionDetailModel, TransactionFetchResult

if TYPE_CHECKING:
    from lockstep_sdk.api import LockstepApi

_TRANSACTIONS = "/api/v1/Transactions"


class TransactionsClient:
    def __init__(self, api: LockstepApi):
        self._api = api

    def query_transactions(
        self,
        filter: Optional[str] = None,
        include: Optional[str] = None,
        order: Optional[str] = None,
        page_size: Optional[int] = None,
        page_number: Optional[int] = None,
        current_date: Optional[date] = None,
    ) -> TransactionFetchResult:
        """Query transactions with summary, aging and per-currency totals.

        ``current_date`` is the date days past due are calculated against;
        the server uses today's UTC date when it is omitted.
        """
        params = query_options(filter, include, order, page_size, page_number)
        params["currentDate"] = current_date
        return self._api.request(
            "GET", f"{_TRANSACTIONS}/query", TransactionFetchResult, params=params
        ).value

    def retrieve_transaction_details(self, id: UUID | str) -> list[TransactionDetailModel]:
        """Invoices a payment was applied to, or payments applied to an invoice."""
        return self._api.request(
            "GET", f"{record_path(_TRANSACTIONS, id)}/details", list[TransactionDetailModel]
        ).value
