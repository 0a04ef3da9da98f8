"""API methods related to workflow statuses."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from uuid import UUID

from lockstep_sdk.clients.helpers import query_options, record_path
from lockstep_sdk.schemas.common import FetchResult
from lockstep_sdk.schemas.workflow_statuses import WorkflowStatusModel

if TYPE_CHECKING:
    from lockstep_sdk.api import LockstepApi

_WORKFLOW_STATUSES = "/api/v1/workflow-statuses"


class WorkflowStatusesClient:
    def __init__(self, api: LockstepApi):
        self._api = api

    def retrieve_workflow_status(self, id: UUID | str) -> WorkflowStatusModel:
        return self._api.request("GET", record_path(_WORKFLOW_STATUSES, id), WorkflowStatusModel).value

    def create_workflow_statuses(self, body: list[WorkflowStatusModel]) -> list[WorkflowStatusModel]:
        return self._api.request("POST", _WORKFLOW_STATUSES, list[WorkflowStatusModel], body=body).value

    def query_workflow_statuses(
        self,
        filter: Optional[str] = None,
        order: Optional[str] = None,
        page_size: Optional[int] = None,
        page_number: Optional[int] = None,
    ) -> FetchResult[WorkflowStatusModel]:
        return self._api.request(
            "GET",
            f"{_WORKFLOW_STATUSES}/query",
            FetchResult[WorkflowStatusModel],
            params=query_options(filter, None, order, page_size, page_number),
        ).value
