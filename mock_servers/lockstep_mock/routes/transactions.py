"""Transaction endpoints.

Implements:
    GET    /api/v1/Transactions/query?currentDate=YYYY-MM-DD
    GET    /api/v1/Transactions/{id}/details

The query response carries query-wide totals, aging buckets and
per-currency totals alongside the requested page.
"""

from __future__ import annotations

from collections import OrderedDict
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Query, Response

from lockstep_sdk.schemas.types import dumps
from mock_servers.lockstep_mock.db import get_db, paginate
from mock_servers.lockstep_mock.routes.helpers import require

router = APIRouter(tags=["Transactions"])

# (label, lower bound exclusive, upper bound inclusive) in days past due.
AGING_BUCKETS: tuple[tuple[str, int, int | None], ...] = (
    ("Current", -1, 0),
    ("1-30", 0, 30),
    ("31-60", 30, 60),
    ("61-90", 60, 90),
    ("90+", 90, None),
)


def _amount(record: dict, field: str) -> Decimal:
    value = record.get(field)
    return Decimal(str(value)) if value is not None else Decimal("0")


def _days_past_due(record: dict, current: date) -> int:
    due = record.get("dueDate")
    if not due or _amount(record, "outstandingAmount") == 0:
        return 0
    return max(0, (current - date.fromisoformat(due[:10])).days)


def _bucket(days: int) -> str:
    for label, lower, upper in AGING_BUCKETS:
        if days > lower and (upper is None or days <= upper):
            return label
    return AGING_BUCKETS[-1][0]


def _summarize(rows: list[dict]) -> dict:
    invoices = [r for r in rows if r.get("transactionType") == "Invoice"]
    return {
        "summary": {
            "totalCount": len(rows),
            "totalAmount": sum((_amount(r, "transactionAmount") for r in rows), Decimal("0")),
            "outstandingAmount": sum((_amount(r, "outstandingAmount") for r in rows), Decimal("0")),
            "invoiceOpenCount": sum(1 for r in invoices if _amount(r, "outstandingAmount") > 0),
            "invoicePastDueCount": sum(1 for r in invoices if r["daysPastDue"] > 0),
        },
        "agingSummary": _aging(invoices),
        "currencySummaries": _by_currency(rows),
    }


def _aging(invoices: list[dict]) -> list[dict]:
    totals: "OrderedDict[str, Decimal]" = OrderedDict((label, Decimal("0")) for label, _, _ in AGING_BUCKETS)
    for r in invoices:
        totals[_bucket(r["daysPastDue"])] += _amount(r, "outstandingAmount")
    return [{"bucket": label, "outstandingBalance": total} for label, total in totals.items()]


def _by_currency(rows: list[dict]) -> list[dict]:
    totals: "OrderedDict[str, list[Decimal]]" = OrderedDict()
    for r in rows:
        entry = totals.setdefault(r.get("currencyCode") or "", [Decimal("0"), Decimal("0")])
        entry[0] += _amount(r, "transactionAmount")
        entry[1] += _amount(r, "outstandingAmount")
    return [
        {"currencyCode": code, "totalAmount": total, "outstandingAmount": outstanding}
        for code, (total, outstanding) in totals.items()
    ]


@router.get("/Transactions/query")
async def query_transactions(
    filter: Optional[str] = Query(None),
    order: Optional[str] = Query(None),
    page_size: Optional[int] = Query(None, alias="pageSize"),
    page_number: Optional[int] = Query(None, alias="pageNumber"),
    current_date: Optional[date] = Query(None, alias="currentDate"),
):
    current = current_date or datetime.now(timezone.utc).date()
    rows = [
        {**r, "daysPastDue": _days_past_due(r, current)}
        for r in get_db().search("transaction", filter, order)
    ]
    page = paginate(rows, page_size, page_number)
    page.update(_summarize(rows))
    return Response(content=dumps(page), media_type="application/json")


@router.get("/Transactions/{transaction_id}/details")
async def retrieve_transaction_details(transaction_id: str):
    require("transaction", transaction_id, "Transaction")
    return get_db().search("transactionDetail", f"parentTransactionId eq '{transaction_id}'")
