"""Workflow status endpoints.

Implements:
    GET    /api/v1/workflow-statuses/query
    GET    /api/v1/workflow-statuses/{id}
    POST   /api/v1/workflow-statuses
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Query

from lockstep_sdk.schemas.workflow_statuses import WorkflowStatusModel
from mock_servers.lockstep_mock.routes.helpers import query_page, require, store

router = APIRouter(tags=["WorkflowStatuses"])


@router.get("/workflow-statuses/query")
async def query_workflow_statuses(
    filter: Optional[str] = Query(None),
    order: Optional[str] = Query(None),
    page_size: Optional[int] = Query(None, alias="pageSize"),
    page_number: Optional[int] = Query(None, alias="pageNumber"),
):
    return query_page("workflowStatus", filter, order, page_size, page_number)


@router.get("/workflow-statuses/{status_id}")
async def retrieve_workflow_status(status_id: str):
    return require("workflowStatus", status_id, "WorkflowStatus")


@router.post("/workflow-statuses")
async def create_workflow_statuses(body: List[WorkflowStatusModel]):
    return [store("workflowStatus", status) for status in body]
