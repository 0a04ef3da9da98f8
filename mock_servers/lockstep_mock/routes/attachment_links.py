"""Attachment link endpoints.

Implements:
    GET    /api/v1/AttachmentLinks?attachmentId=&objectKey=&tableName=
    POST   /api/v1/AttachmentLinks
    DELETE /api/v1/AttachmentLinks?attachmentId=&objectKey=&tableName=
    GET    /api/v1/AttachmentLinks/query
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Query

from lockstep_sdk.schemas.attachment_links import AttachmentLinkModel
from mock_servers.lockstep_mock.db import get_db
from mock_servers.lockstep_mock.errors import ProblemError
from mock_servers.lockstep_mock.routes.helpers import query_page, store

router = APIRouter(tags=["AttachmentLinks"])


def _matching_links(attachment_id: Optional[str], object_key: Optional[str], table_name: Optional[str]) -> List[dict]:
    wanted = {"attachmentId": attachment_id, "objectKey": object_key, "tableKey": table_name}
    wanted = {field: value.lower() for field, value in wanted.items() if value}
    return [
        r for r in get_db().list_all("attachmentLink")
        if all(str(r.get(field) or "").lower() == value for field, value in wanted.items())
    ]


@router.get("/AttachmentLinks/query")
async def query_attachment_links(
    filter: Optional[str] = Query(None),
    order: Optional[str] = Query(None),
    page_size: Optional[int] = Query(None, alias="pageSize"),
    page_number: Optional[int] = Query(None, alias="pageNumber"),
):
    return query_page("attachmentLink", filter, order, page_size, page_number)


@router.get("/AttachmentLinks")
async def retrieve_attachment_link(
    attachment_id: str = Query(..., alias="attachmentId"),
    object_key: str = Query(..., alias="objectKey"),
    table_name: str = Query(..., alias="tableName"),
):
    matches = _matching_links(attachment_id, object_key, table_name)
    if not matches:
        raise ProblemError(
            404,
            "Record not found",
            f"No attachment link for attachment '{attachment_id}' on {table_name} '{object_key}'",
        )
    return matches[0]


@router.post("/AttachmentLinks")
async def upload_attachment(body: List[AttachmentLinkModel]):
    return [store("attachmentLink", link) for link in body]


@router.delete("/AttachmentLinks")
async def delete_attachment_link(
    attachment_id: Optional[str] = Query(None, alias="attachmentId"),
    object_key: Optional[str] = Query(None, alias="objectKey"),
    table_name: Optional[str] = Query(None, alias="tableName"),
):
    if not (attachment_id or object_key or table_name):
        raise ProblemError(400, "Invalid request", "At least one of attachmentId, objectKey or tableName is required")
    db = get_db()
    removed = [r["attachmentId"] for r in _matching_links(attachment_id, object_key, table_name)]
    for link_id in removed:
        db.delete("attachmentLink", link_id)
    return {"messages": [f"Deleted attachment link {link_id}" for link_id in removed]}
