"""API methods related to journal entries and journal entry lines."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from uuid import UUID

from lockstep_sdk.clients.helpers import query_options, record_path
from lockstep_sdk.schemas.common import FetchResult
from lockstep_sdk.schemas.journal_entries import JournalEntryLineModel, JournalEntryModel

if TYPE_CHECKING:
    from lockstep_sdk.api import LockstepApi

_ENTRIES = "/api/v1/journal-entries"
_LINES = "/api/v1/journal-entry-lines"


class JournalEntriesClient:
    def __init__(self, api: LockstepApi):
        self._api = api

    def retrieve_journal_entry(self, id: UUID | str, include: Optional[str] = None) -> JournalEntryModel:
        """Retrieve one journal entry; ``include`` may name ``Lines`` or ``Attachments``."""
        return self._api.request(
            "GET", record_path(_ENTRIES, id), JournalEntryModel, params={"include": include}
        ).value

    def create_journal_entries(self, body: list[JournalEntryModel]) -> list[JournalEntryModel]:
        """Create one or more journal entries and return the created records."""
        return self._api.request("POST", _ENTRIES, list[JournalEntryModel], body=body).value

    def query_journal_entries(
        self,
        filter: Optional[str] = None,
        include: Optional[str] = None,
        order: Optional[str] = None,
        page_size: Optional[int] = None,
        page_number: Optional[int] = None,
    ) -> FetchResult[JournalEntryModel]:
        return self._api.request(
            "GET",
            f"{_ENTRIES}/query",
            FetchResult[JournalEntryModel],
            params=query_options(filter, include, order, page_size, page_number),
        ).value


class JournalEntryLinesClient:
    def __init__(self, api: LockstepApi):
        self._api = api

    def retrieve_journal_entry_line(self, id: UUID | str, include: Optional[str] = None) -> JournalEntryLineModel:
        return self._api.request(
            "GET", record_path(_LINES, id), JournalEntryLineModel, params={"include": include}
        ).value

    def query_journal_entry_lines(
        self,
        filter: Optional[str] = None,
        include: Optional[str] = None,
        order: Optional[str] = None,
        page_size: Optional[int] = None,
        page_number: Optional[int] = None,
    ) -> FetchResult[JournalEntryLineModel]:
        return self._api.request(
            "GET",
            f"{_LINES}/query",
            FetchResult[JournalEntryLineModel],
            params=query_options(filter, include, order, page_size, page_number),
        ).value
