"""Journal entry and journal entry line endpoints.

Implements:
    GET    /api/v1/journal-entries/query
    GET    /api/v1/journal-entries/{id}?include=Lines
    POST   /api/v1/journal-entries
    GET    /api/v1/journal-entry-lines/query
    GET    /api/v1/journal-entry-lines/{id}
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Query

from lockstep_sdk.schemas.journal_entries import JournalEntryModel
from mock_servers.lockstep_mock.db import get_db
from mock_servers.lockstep_mock.routes.helpers import query_page, require, store

router = APIRouter(tags=["JournalEntries"])


def _with_lines(entry: dict, include: Optional[str]) -> dict:
    if not include or "lines" not in include.lower():
        return entry
    lines = get_db().search("journalEntryLine", f"journalEntryId eq '{entry['journalEntryId']}'")
    return {**entry, "lines": lines}


@router.get("/journal-entries/query")
async def query_journal_entries(
    filter: Optional[str] = Query(None),
    include: Optional[str] = Query(None),
    order: Optional[str] = Query(None),
    page_size: Optional[int] = Query(None, alias="pageSize"),
    page_number: Optional[int] = Query(None, alias="pageNumber"),
):
    page = query_page("journalEntry", filter, order, page_size, page_number)
    page["records"] = [_with_lines(r, include) for r in page["records"]]
    return page


@router.get("/journal-entries/{entry_id}")
async def retrieve_journal_entry(entry_id: str, include: Optional[str] = Query(None)):
    return _with_lines(require("journalEntry", entry_id, "JournalEntry"), include)


@router.post("/journal-entries")
async def create_journal_entries(body: List[JournalEntryModel]):
    return [store("journalEntry", entry) for entry in body]


@router.get("/journal-entry-lines/query")
async def query_journal_entry_lines(
    filter: Optional[str] = Query(None),
    order: Optional[str] = Query(None),
    page_size: Optional[int] = Query(None, alias="pageSize"),
    page_number: Optional[int] = Query(None, alias="pageNumber"),
):
    return query_page("journalEntryLine", filter, order, page_size, page_number)


@router.get("/journal-entry-lines/{line_id}")
async def retrieve_journal_entry_line(line_id: str):
    return require("journalEntryLine", line_id, "JournalEntryLine")
