"""API methods related to magic links."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from lockstep_sdk.clients.helpers import query_options, record_path
from lockstep_sdk.schemas.common import ActionResultModel, FetchResult
from lockstep_sdk.schemas.magic_links import MagicLinkModel, MagicLinkSummaryModel

if TYPE_CHECKING:
    from lockstep_sdk.api import LockstepApi

_MAGIC_LINKS = "/api/v1/useraccounts/magic-links"


class MagicLinksClient:
    def __init__(self, api: LockstepApi):
        self._api = api

    def retrieve_magic_link(self, id: UUID | str, include: Optional[str] = None) -> MagicLinkModel:
        return self._api.request(
            "GET", record_path(_MAGIC_LINKS, id), MagicLinkModel, params={"include": include}
        ).value

    def revoke_magic_link(self, id: UUID | str) -> ActionResultModel:
        """Revoke a magic link so it can no longer be used to log in."""
        return self._api.request("DELETE", record_path(_MAGIC_LINKS, id), ActionResultModel).value

    def query_magic_links(
        self,
        filter: Optional[str] = None,
        include: Optional[str] = None,
        order: Optional[str] = None,
        page_size: Optional[int] = None,
        page_number: Optional[int] = None,
    ) -> FetchResult[MagicLinkModel]:
        return self._api.request(
            "GET",
            f"{_MAGIC_LINKS}/query",
            FetchResult[MagicLinkModel],
            params=query_options(filter, include, order, page_size, page_number),
        ).value

    def magic_link_summary(
        self,
        from_: Optional[datetime] = None,
        to: Optional[datetime] = None,
    ) -> MagicLinkSummaryModel:
        """Totals for magic links created within the optional ``from_``/``to`` window."""
        return self._api.request(
            "GET",
            f"{_MAGIC_LINKS}/summary",
            MagicLinkSummaryModel,
            params={"from": from_, "to": to},
        ).value
