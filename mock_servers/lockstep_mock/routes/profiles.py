"""Accounting profile, accounting profile contact and public company profile endpoints.

Implements:
    GET    /api/v1/profiles/accounting/query
    GET    /api/v1/profiles/accounting/{id}
    PATCH  /api/v1/profiles/accounting/{id}
    DELETE /api/v1/profiles/accounting/{id}
    POST   /api/v1/profiles/accounting
    GET    /api/v1/profiles/accounting/contacts/query
    GET    /api/v1/profiles/accounting/contacts/{id}
    DELETE /api/v1/profiles/accounting/contacts/{id}
    POST   /api/v1/profiles/accounting/contacts
    PATCH  /api/v1/profiles/accounting/contacts/{id}/{contactId}
    GET    /api/v1/profiles/companies/query
    GET    /api/v1/profiles/companies/{urlSlug}
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Query

from lockstep_sdk.schemas.profiles import AccountingProfileContactModel, AccountingProfileModel
from mock_servers.lockstep_mock.db import get_db
from mock_servers.lockstep_mock.errors import not_found
from mock_servers.lockstep_mock.routes.helpers import now_iso, query_page, require, store

router = APIRouter(tags=["Profiles"])


# --- Accounting contacts (registered first so "contacts" never matches {id}) ---

@router.get("/accounting/contacts/query")
async def query_accounting_profile_contacts(
    filter: Optional[str] = Query(None),
    order: Optional[str] = Query(None),
    page_size: Optional[int] = Query(None, alias="pageSize"),
    page_number: Optional[int] = Query(None, alias="pageNumber"),
):
    return query_page("accountingProfileContact", filter, order, page_size, page_number)


@router.get("/accounting/contacts/{contact_link_id}")
async def retrieve_accounting_profile_contact(contact_link_id: str):
    return require("accountingProfileContact", contact_link_id, "AccountingProfileContact")


@router.delete("/accounting/contacts/{contact_link_id}")
async def delete_accounting_profile_contact(contact_link_id: str):
    if not get_db().delete("accountingProfileContact", contact_link_id):
        raise not_found("AccountingProfileContact", contact_link_id)
    return {"messages": [f"Deleted accounting profile contact {contact_link_id}"]}


@router.post("/accounting/contacts")
async def create_accounting_profile_contacts(body: List[AccountingProfileContactModel]):
    return [store("accountingProfileContact", contact) for contact in body]


@router.patch("/accounting/contacts/{contact_link_id}/{contact_id}")
async def update_accounting_profile_contact(contact_link_id: str, contact_id: str):
    require("accountingProfileContact", contact_link_id, "AccountingProfileContact")
    return get_db().update(
        "accountingProfileContact",
        contact_link_id,
        {"contactId": contact_id, "modified": now_iso()},
    )


# --- Accounting profiles ---

@router.get("/accounting/query")
async def query_accounting_profiles(
    filter: Optional[str] = Query(None),
    order: Optional[str] = Query(None),
    page_size: Optional[int] = Query(None, alias="pageSize"),
    page_number: Optional[int] = Query(None, alias="pageNumber"),
):
    return query_page("accountingProfile", filter, order, page_size, page_number)


@router.get("/accounting/{profile_id}")
async def retrieve_accounting_profile(profile_id: str):
    return require("accountingProfile", profile_id, "AccountingProfile")


@router.patch("/accounting/{profile_id}")
async def update_accounting_profile(profile_id: str, body: Dict[str, Any] = Body(...)):
    require("accountingProfile", profile_id, "AccountingProfile")
    body.pop("accountingProfileId", None)
    return get_db().update("accountingProfile", profile_id, {**body, "modified": now_iso()})


@router.delete("/accounting/{profile_id}")
async def delete_accounting_profile(profile_id: str):
    if not get_db().delete("accountingProfile", profile_id):
        raise not_found("AccountingProfile", profile_id)
    return {"messages": [f"Deleted accounting profile {profile_id}"]}


@router.post("/accounting")
async def create_accounting_profiles(body: List[AccountingProfileModel]):
    return [store("accountingProfile", profile) for profile in body]


# --- Public company profiles ---

@router.get("/companies/query")
async def query_public_company_profiles(
    filter: Optional[str] = Query(None),
    order: Optional[str] = Query(None),
    page_size: Optional[int] = Query(None, alias="pageSize"),
    page_number: Optional[int] = Query(None, alias="pageNumber"),
):
    return query_page("publicCompanyProfile", filter, order, page_size, page_number)


@router.get("/companies/{url_slug}")
async def retrieve_public_company_profile(url_slug: str):
    return require("publicCompanyProfile", url_slug, "PublicCompanyProfile")
