"""Magic link endpoints.

Implements:
    GET    /api/v1/useraccounts/magic-links/query
    GET    /api/v1/useraccounts/magic-links/summary?from=&to=
    GET    /api/v1/useraccounts/magic-links/{id}
    DELETE /api/v1/useraccounts/magic-links/{id}
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Query

from mock_servers.lockstep_mock.db import get_db
from mock_servers.lockstep_mock.routes.helpers import now_iso, query_page, require

router = APIRouter(tags=["MagicLinks"])

# Magic link status code the mock treats as "failed to send".
BOUNCED_STATUS = 3


def _aware(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


def _in_window(record: dict, start: Optional[datetime], end: Optional[datetime]) -> bool:
    created = record.get("created")
    if created is None:
        return start is None and end is None
    created_at = _aware(datetime.fromisoformat(created.replace("Z", "+00:00")))
    if start is not None and created_at < _aware(start):
        return False
    if end is not None and created_at > _aware(end):
        return False
    return True


@router.get("/magic-links/query")
async def query_magic_links(
    filter: Optional[str] = Query(None),
    order: Optional[str] = Query(None),
    page_size: Optional[int] = Query(None, alias="pageSize"),
    page_number: Optional[int] = Query(None, alias="pageNumber"),
):
    return query_page("magicLink", filter, order, page_size, page_number)


@router.get("/magic-links/summary")
async def magic_link_summary(
    start: Optional[datetime] = Query(None, alias="from"),
    end: Optional[datetime] = Query(None, alias="to"),
):
    db = get_db()
    links = [r for r in db.list_all("magicLink") if _in_window(r, start, end)]
    group = next(iter(db.list_all("groupAccount")), {})
    return {
        "groupKey": group.get("groupKey"),
        "totalCount": len(links),
        "totalBounced": sum(1 for r in links if r.get("status") == BOUNCED_STATUS),
        "totalVisited": sum(r.get("visits") or 0 for r in links),
    }


@router.get("/magic-links/{link_id}")
async def retrieve_magic_link(link_id: str):
    return require("magicLink", link_id, "MagicLink")


@router.delete("/magic-links/{link_id}")
async def revoke_magic_link(link_id: str):
    require("magicLink", link_id, "MagicLink")
    get_db().update("magicLink", link_id, {"revoked": now_iso()})
    return {"messages": [f"Magic link {link_id} revoked"]}
