"""Group account and financial institution account endpoints.

Implements:
    GET    /api/v1/GroupAccounts/me
    PATCH  /api/v1/GroupAccounts/{id}
    GET    /api/v1/financial-institution-accounts/query
    GET    /api/v1/financial-institution-accounts/{id}
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Query

from mock_servers.lockstep_mock.db import get_db
from mock_servers.lockstep_mock.errors import ProblemError
from mock_servers.lockstep_mock.routes.helpers import now_iso, query_page, require

router = APIRouter(tags=["Accounts"])

# Fields the server owns; PATCH requests may not change them.
_READ_ONLY_GROUP_FIELDS = {"groupKey", "created", "createdUserId", "modified", "modifiedUserId"}


@router.get("/GroupAccounts/me")
async def retrieve_group_account_data():
    accounts = get_db().list_all("groupAccount")
    if not accounts:
        raise ProblemError(404, "Record not found", "No group account is configured")
    return accounts[0]


@router.patch("/GroupAccounts/{group_key}")
async def update_group_account(group_key: str, body: Dict[str, Any] = Body(...)):
    require("groupAccount", group_key, "GroupAccount")
    read_only = sorted(_READ_ONLY_GROUP_FIELDS & body.keys())
    if read_only:
        raise ProblemError(400, "Invalid update", f"Fields cannot be changed: {', '.join(read_only)}")
    return get_db().update("groupAccount", group_key, {**body, "modified": now_iso()})


@router.get("/financial-institution-accounts/query")
async def query_financial_institution_accounts(
    filter: Optional[str] = Query(None),
    order: Optional[str] = Query(None),
    page_size: Optional[int] = Query(None, alias="pageSize"),
    page_number: Optional[int] = Query(None, alias="pageNumber"),
):
    return query_page("financialInstitutionAccount", filter, order, page_size, page_number)


@router.get("/financial-institution-accounts/{account_id}")
async def retrieve_financial_institution_account(account_id: str):
    return require("financialInstitutionAccount", account_id, "FinancialInstitutionAccount")
