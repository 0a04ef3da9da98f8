"""API methods related to group accounts and financial institution accounts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional
from uuid import UUID

from lockstep_sdk.clients.helpers import query_options, record_path
from lockstep_sdk.schemas.accounts import FinancialInstitutionAccountModel, GroupAccountModel
from lockstep_sdk.schemas.common import FetchResult

if TYPE_CHECKING:
    from lockstep_sdk.api import LockstepApi

_GROUP_ACCOUNTS = "/api/v1/GroupAccounts"
_FI_ACCOUNTS = "/api/v1/financial-institution-accounts"


class GroupAccountsClient:
    def __init__(self, api: LockstepApi):
        self._api = api

    def retrieve_group_account_data(self) -> GroupAccountModel:
        """Group account of the authenticated user."""
        return self._api.request("GET", f"{_GROUP_ACCOUNTS}/me", GroupAccountModel).value

    def update_group_account(self, id: UUID | str, body: dict[str, Any]) -> GroupAccountModel:
        """PATCH the named fields of a group account; omitted fields stay unchanged."""
        return self._api.request("PATCH", record_path(_GROUP_ACCOUNTS, id), GroupAccountModel, body=body).value


class FinancialInstitutionAccountsClient:
    def __init__(self, api: LockstepApi):
        self._api = api

    def retrieve_financial_institution_account(self, id: UUID | str) -> FinancialInstitutionAccountModel:
        return self._api.request(
            "GET", record_path(_FI_ACCOUNTS, id), FinancialInstitutionAccountModel
        ).value

    def query_financial_institution_accounts(
        self,
        filter: Optional[str] = None,
        include: Optional[str] = None,
        order: Optional[str] = None,
        page_size: Optional[int] = None,
        page_number: Optional[int] = None,
    ) -> FetchResult[FinancialInstitutionAccountModel]:
        return self._api.request(
            "GET",
            f"{_FI_ACCOUNTS}/query",
            FetchResult[FinancialInstitutionAccountModel],
            params=query_options(filter, include, order, page_size, page_number),
        ).value
