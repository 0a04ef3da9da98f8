"""API methods related to accounting profiles, their contacts and public company profiles."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional
from uuid import UUID

from lockstep_sdk.clients.helpers import query_options, record_path
from lockstep_sdk.schemas.common import ActionResultModel, DeleteResult, FetchResult
from lockstep_sdk.schemas.profiles import (
    AccountingProfileContactModel,
    AccountingProfileModel,
    PublicCompanyProfileModel,
)

if TYPE_CHECKING:
    from lockstep_sdk.api import LockstepApi

_ACCOUNTING = "/api/v1/profiles/accounting"
_ACCOUNTING_CONTACTS = "/api/v1/profiles/accounting/contacts"
_COMPANIES = "/api/v1/profiles/companies"


class ProfilesAccountingClient:
    def __init__(self, api: LockstepApi):
        self._api = api

    def retrieve_accounting_profile(self, id: UUID | str, include: Optional[str] = None) -> AccountingProfileModel:
        return self._api.request(
            "GET", record_path(_ACCOUNTING, id), AccountingProfileModel, params={"include": include}
        ).value

    def update_accounting_profile(self, id: UUID | str, body: dict[str, Any]) -> AccountingProfileModel:
        """PATCH the named fields of an accounting profile; omitted fields stay unchanged."""
        return self._api.request("PATCH", record_path(_ACCOUNTING, id), AccountingProfileModel, body=body).value

    def delete_accounting_profile(self, id: UUID | str) -> ActionResultModel:
        return self._api.request("DELETE", record_path(_ACCOUNTING, id), ActionResultModel).value

    def create_accounting_profiles(self, body: list[AccountingProfileModel]) -> list[AccountingProfileModel]:
        return self._api.request("POST", _ACCOUNTING, list[AccountingProfileModel], body=body).value

    def query_accounting_profiles(
        self,
        filter: Optional[str] = None,
        include: Optional[str] = None,
        order: Optional[str] = None,
        page_size: Optional[int] = None,
        page_number: Optional[int] = None,
    ) -> FetchResult[AccountingProfileModel]:
        return self._api.request(
            "GET",
            f"{_ACCOUNTING}/query",
            FetchResult[AccountingProfileModel],
            params=query_options(filter, include, order, page_size, page_number),
        ).value


class ProfilesAccountingContactsClient:
    def __init__(self, api: LockstepApi):
        self._api = api

    def retrieve_accounting_profile_contact(self, id: UUID | str) -> AccountingProfileContactModel:
        return self._api.request(
            "GET", record_path(_ACCOUNTING_CONTACTS, id), AccountingProfileContactModel
        ).value

    def delete_accounting_profile_contact(self, id: UUID | str) -> DeleteResult:
        return self._api.request("DELETE", record_path(_ACCOUNTING_CONTACTS, id), DeleteResult).value

    def create_accounting_profile_contacts(
        self, body: list[AccountingProfileContactModel]
    ) -> list[AccountingProfileContactModel]:
        return self._api.request(
            "POST", _ACCOUNTING_CONTACTS, list[AccountingProfileContactModel], body=body
        ).value

    def update_accounting_profile_contact(
        self, id: UUID | str, contact_id: UUID | str
    ) -> AccountingProfileContactModel:
        """Point an accounting profile contact at a different contact."""
        return self._api.request(
            "PATCH", f"{_ACCOUNTING_CONTACTS}/{id}/{contact_id}", AccountingProfileContactModel
        ).value

    def query_accounting_profile_contacts(
        self,
        filter: Optional[str] = None,
        include: Optional[str] = None,
        order: Optional[str] = None,
        page_size: Optional[int] = None,
        page_number: Optional[int] = None,
    ) -> FetchResult[AccountingProfileContactModel]:
        return self._api.request(
            "GET",
            f"{_ACCOUNTING_CONTACTS}/query",
            FetchResult[AccountingProfileContactModel],
            params=query_options(filter, include, order, page_size, page_number),
        ).value


class ProfilesCompaniesClient:
    """Public company profiles; these endpoints work without authentication."""

    def __init__(self, api: LockstepApi):
        self._api = api

    def retrieve_public_company_profile(self, url_slug: str) -> PublicCompanyProfileModel:
        return self._api.request("GET", f"{_COMPANIES}/{url_slug}", PublicCompanyProfileModel).value

    def query_public_company_profiles(
        self,
        filter: Optional[str] = None,
        order: Optional[str] = None,
        page_size: Optional[int] = None,
        page_number: Optional[int] = None,
    ) -> FetchResult[PublicCompanyProfileModel]:
        return self._api.request(
            "GET",
            f"{_COMPANIES}/query",
            FetchResult[PublicCompanyProfileModel],
            params=query_options(filter, None, order, page_size, page_number),
        ).value
