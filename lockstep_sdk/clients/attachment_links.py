"""API methods related to attachment links."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from uuid import UUID

from lockstep_sdk.clients.helpers import query_options
from lockstep_sdk.schemas.attachment_links import AttachmentLinkModel
from lockstep_sdk.schemas.common import DeleteResult, FetchResult

if TYPE_CHECKING:
    from lockstep_sdk.api import LockstepApi

_ATTACHMENT_LINKS = "/api/v1/AttachmentLinks"


class AttachmentLinksClient:
    def __init__(self, api: LockstepApi):
        self._api = api

    def retrieve_attachment_link(
        self, attachment_id: UUID | str, object_key: UUID | str, table_name: str
    ) -> AttachmentLinkModel:
        """Link between ``attachment_id`` and the record ``object_key`` in ``table_name``."""
        return self._api.request(
            "GET",
            _ATTACHMENT_LINKS,
            AttachmentLinkModel,
            params={"attachmentId": attachment_id, "objectKey": object_key, "tableName": table_name},
        ).value

    def upload_attachment(self, body: list[AttachmentLinkModel]) -> list[AttachmentLinkModel]:
        """Create one or more attachment links."""
        return self._api.request("POST", _ATTACHMENT_LINKS, list[AttachmentLinkModel], body=body).value

    def delete_attachment_link(
        self,
        attachment_id: Optional[UUID | str] = None,
        object_key: Optional[UUID | str] = None,
        table_name: Optional[str] = None,
    ) -> DeleteResult:
        return self._api.request(
            "DELETE",
            _ATTACHMENT_LINKS,
            DeleteResult,
            params={"attachmentId": attachment_id, "objectKey": object_key, "tableName": table_name},
        ).value

    def query_attachment_links(
        self,
        filter: Optional[str] = None,
        include: Optional[str] = None,
        order: Optional[str] = None,
        page_size: Optional[int] = None,
        page_number: Optional[int] = None,
    ) -> FetchResult[AttachmentLinkModel]:
        return self._api.request(
            "GET",
            f"{_ATTACHMENT_LINKS}/query",
            FetchResult[AttachmentLinkModel],
            params=query_options(filter, include, order, page_size, page_number),
        ).value
